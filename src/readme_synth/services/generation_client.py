"""Credentialed generation client: walks the credential chain in order."""

from __future__ import annotations

import logging

from readme_synth.domain.entities import AttemptKind, GenerationRequest
from readme_synth.domain.exceptions import CredentialsExhaustedError, GenerationError
from readme_synth.domain.ports.generation_transport import GenerationTransport
from readme_synth.domain.value_objects import CredentialChain

logger = logging.getLogger(__name__)


class CredentialedGenerationClient:
    """Send a prompt with the first credential the service accepts.

    An authorization failure advances to the next credential; any other
    failure stops the walk and is raised as :class:`GenerationError`.
    Attempts are strictly sequential and each credential is tried once.
    """

    def __init__(self, chain: CredentialChain, transport: GenerationTransport) -> None:
        self._chain = chain
        self._transport = transport

    async def generate(self, request: GenerationRequest) -> str:
        total = len(self._chain)
        for position, credential in enumerate(self._chain, start=1):
            outcome = await self._transport.attempt(credential, request)

            if outcome.kind is AttemptKind.SUCCESS:
                if position > 1:
                    logger.info("Generation succeeded with fallback credential %s", credential.source)
                return outcome.text

            if outcome.kind is AttemptKind.AUTH_FAILURE:
                logger.warning(
                    "Credential %s rejected (%d/%d), trying next",
                    credential.source,
                    position,
                    total,
                )
                continue

            raise GenerationError(
                f"Text generation failed: {outcome.error}"
            ) from outcome.error

        raise CredentialsExhaustedError(
            f"All {total} generation credential(s) were rejected."
        )

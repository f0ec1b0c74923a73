"""Port for the generation transport, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from readme_synth.domain.entities import AttemptOutcome, GenerationRequest
from readme_synth.domain.value_objects import Credential


class GenerationTransport(Protocol):
    """Abstract contract for one credentialed call to a text-generation service."""

    async def attempt(
        self, credential: Credential, request: GenerationRequest
    ) -> AttemptOutcome:
        """Send *request* using *credential* and classify the result.

        Implementations must not raise for service errors; they report them
        as ``AUTH_FAILURE`` or ``FATAL_FAILURE`` outcomes instead.
        """
        ...

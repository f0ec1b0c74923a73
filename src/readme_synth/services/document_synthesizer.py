"""Document synthesizer: prompt construction for every generation mode.

Three prompts are sent to the generation service: a project summary, a
backfill of missing README sections, and the full seven-section "AutoDoc"
document.  File excerpts are truncated and masked before they are embedded.
"""

from __future__ import annotations

import logging
import re
from typing import Protocol, Sequence

from readme_synth.domain.entities import GenerationRequest, RepoFile
from readme_synth.services.security_sentinel import redact

logger = logging.getLogger(__name__)

# ── Prompt templates ────────────────────────────────────────────────────────

SUMMARY_PROMPT = """\
Based on the following files from a GitHub repository, provide a comprehensive \
summary of the project including:

1. What the project does
2. Main technologies/frameworks used
3. Key components/features
4. Overall architecture/structure

Files:
{files}

Please provide a concise but detailed summary (200-400 words).
"""

BACKFILL_PROMPT = """\
Generate the missing or improved sections for a README based on the project content below.
The project summary is: {content}

Generate the following sections: {sections}

For each section, provide appropriate content that fits a professional README.
Format as markdown with headers.
"""

AUTODOC_SECTIONS: tuple[str, ...] = (
    "Project Overview",
    "How It Works",
    "Frontend",
    "Backend",
    "Technologies Used",
    "How to Run Locally",
    "Why This Project Is Useful",
)

AUTODOC_PROMPT = """\
You are AutoDoc AI, an autonomous documentation agent.

Your goal is to generate documentation that is:
- Clear
- Simple
- Friendly
- Easy to understand for beginners and non-technical readers

Do not use emojis.
Do not use complex words.
Do not assume prior knowledge.

Input:
Source code files from a GitHub repository.

Your tasks:

1. Understand what the project does at a high level.
2. Explain the project in simple language.
3. Structure the README using the following sections only, as level-two \
markdown headings, in this order:

{sections}

4. For each section:
   - Use short paragraphs.
   - Use bullet points where helpful.
   - Explain concepts in plain language.
   - Avoid marketing language.

5. Frontend section:
   - Explain what the frontend does.
   - Mention frameworks and UI behavior simply.

6. Backend section:
   - Explain APIs and logic in simple terms.
   - Avoid implementation complexity.

7. Technologies Used:
   - List tools with one-line explanations.

8. How to Run Locally:
   - Step-by-step instructions.
   - Assume the reader is new.

9. Why This Project Is Useful:
   - Explain real-world value clearly.

Output format:
Return only valid Markdown.

Tone:
Calm, friendly, and educational.
Readable by anyone.

Repository files:
{files}"""

SUMMARY_FALLBACK = "Summary could not be generated."
AUTODOC_FALLBACK = "# Unable to generate documentation\n\nDocumentation generation failed."

SUMMARY_FILE_LIMIT = 20
SUMMARY_EXCERPT_CHARS = 1000
AUTODOC_FILE_LIMIT = 30
AUTODOC_EXCERPT_CHARS = 2000

_EMOJI_RE = re.compile(
    "["
    "\\U0001F000-\\U0001FAFF"  # pictographs, emoticons, transport
    "\\u2600-\\u27BF"  # misc symbols, dingbats
    "\\u2B00-\\u2BFF"  # arrows, stars
    "\\uFE0F\\u200D"  # variation selector, zero-width joiner
    "]+[ \\t]?"
)


class TextGenerator(Protocol):
    async def generate(self, request: GenerationRequest) -> str: ...


# ── Helpers ─────────────────────────────────────────────────────────────────


def strip_emoji(markdown: str) -> str:
    """Remove emoji together with the single space that follows each run."""
    return _EMOJI_RE.sub("", markdown)


def missing_autodoc_sections(markdown: str) -> list[str]:
    """Return mandated AutoDoc sections that have no heading in *markdown*."""
    headings = {
        line.lstrip("#").strip().lower()
        for line in markdown.splitlines()
        if line.lstrip().startswith("#")
    }
    return [name for name in AUTODOC_SECTIONS if name.lower() not in headings]


# ── Synthesizer ─────────────────────────────────────────────────────────────


class DocumentSynthesizer:
    """Builds prompts and calls the generation service for each mode."""

    def __init__(
        self,
        generator: TextGenerator,
        *,
        summary_max_tokens: int = 800,
        backfill_max_tokens: int = 1000,
        autodoc_max_tokens: int = 2000,
        autodoc_temperature: float = 0.3,
        redact_secrets: bool = True,
    ) -> None:
        self._generator = generator
        self._summary_max_tokens = summary_max_tokens
        self._backfill_max_tokens = backfill_max_tokens
        self._autodoc_max_tokens = autodoc_max_tokens
        self._autodoc_temperature = autodoc_temperature
        self._redact_secrets = redact_secrets

    # ── Prompt building ─────────────────────────────────────────────────

    def _mask(self, texts: list[str]) -> list[str]:
        """Redact every repository-sourced prompt fragment when enabled."""
        if not self._redact_secrets:
            return texts
        results = [redact(text) for text in texts]
        redactions = sum(r.count for r in results)
        if redactions:
            logger.warning("Redacted %d potential secret(s) from prompt", redactions)
        return [r.text for r in results]

    def format_files(self, files: Sequence[RepoFile], limit: int, excerpt_chars: int) -> str:
        """Render up to *limit* content-bearing files as prompt excerpts."""
        selected = [f for f in files if f.has_content][:limit]
        excerpts = self._mask([(f.content or "")[:excerpt_chars] for f in selected])
        blocks = [f"File: {f.path}\n\n{excerpt}..." for f, excerpt in zip(selected, excerpts)]
        return "\n\n---\n\n".join(blocks)

    def summary_prompt(self, files: Sequence[RepoFile]) -> str:
        return SUMMARY_PROMPT.format(
            files=self.format_files(files, SUMMARY_FILE_LIMIT, SUMMARY_EXCERPT_CHARS)
        )

    def backfill_prompt(self, content: str, sections: Sequence[str]) -> str:
        (masked,) = self._mask([content])
        return BACKFILL_PROMPT.format(content=masked, sections=", ".join(sections))

    def autodoc_prompt(self, files: Sequence[RepoFile]) -> str:
        return AUTODOC_PROMPT.format(
            sections="\n".join(f"   - {name}" for name in AUTODOC_SECTIONS),
            files=self.format_files(files, AUTODOC_FILE_LIMIT, AUTODOC_EXCERPT_CHARS),
        )

    # ── Generation modes ────────────────────────────────────────────────

    async def summarize_project(self, files: Sequence[RepoFile]) -> str:
        """Ask for a 200-400 word overview of the project."""
        text = await self._generator.generate(
            GenerationRequest(
                prompt=self.summary_prompt(files),
                max_tokens=self._summary_max_tokens,
            )
        )
        return text or SUMMARY_FALLBACK

    async def backfill_sections(self, content: str, sections: Sequence[str]) -> str:
        """Ask for markdown covering exactly *sections*; may return ``""``."""
        return await self._generator.generate(
            GenerationRequest(
                prompt=self.backfill_prompt(content, sections),
                max_tokens=self._backfill_max_tokens,
            )
        )

    async def generate_autodoc(self, files: Sequence[RepoFile]) -> str:
        """Produce the full seven-section beginner-oriented README."""
        text = await self._generator.generate(
            GenerationRequest(
                prompt=self.autodoc_prompt(files),
                max_tokens=self._autodoc_max_tokens,
                temperature=self._autodoc_temperature,
            )
        )
        if not text.strip():
            return AUTODOC_FALLBACK

        document = strip_emoji(text)
        missing = missing_autodoc_sections(document)
        if missing:
            logger.warning("AutoDoc output lacks section(s): %s", ", ".join(missing))
        return document

"""Deterministic README assembly from canned section templates.

Nothing here talks to the generation service: every section body is either
content the caller already generated or fixed boilerplate.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from readme_synth.domain.entities import Section

ALWAYS_INCLUDE: tuple[str, ...] = (
    Section.INSTALLATION.value,
    Section.USAGE.value,
    Section.LICENSE.value,
)

SECTION_TEMPLATES: Mapping[str, str] = {
    Section.INSTALLATION.value: "## Installation\n\n```bash\nnpm install\n```\n\n",
    Section.USAGE.value: "## Usage\n\n```\n// Example usage\n```\n\n",
    Section.FEATURES.value: "## Features\n\n- Feature 1\n- Feature 2\n- Feature 3\n\n",
    Section.CONTRIBUTING.value: (
        "## Contributing\n\n"
        "1. Fork the repository\n"
        "2. Create your feature branch (`git checkout -b feature/AmazingFeature`)\n"
        "3. Commit your changes (`git commit -m 'Add some AmazingFeature'`)\n"
        "4. Push to the branch (`git push origin feature/AmazingFeature`)\n"
        "5. Open a Pull Request\n\n"
    ),
    Section.LICENSE.value: (
        "## License\n\n"
        "This project is licensed under the MIT License - "
        "see the [LICENSE](LICENSE) file for details.\n\n"
    ),
    Section.ACKNOWLEDGEMENTS.value: (
        "## Acknowledgements\n\n"
        "* [Contributor Name](https://github.com/username) - Inspiration/Collaboration\n\n"
    ),
}


_TEMPLATE_RANK: Mapping[str, int] = {section.value: i for i, section in enumerate(Section)}


def render_section(section: str, generated: Mapping[str, str] | None = None) -> str:
    """Return the markdown block for *section*.

    Generated content wins over the template; unknown sections without
    generated content become a bare heading.
    """
    body = (generated or {}).get(section, "").strip()
    if body:
        if not body.startswith("#"):
            body = f"## {section}\n\n{body}"
        return f"{body}\n\n"
    return SECTION_TEMPLATES.get(section, f"## {section}\n\n")


def assemble_document(
    title: str,
    summary: str,
    sections: Sequence[str],
    generated: Mapping[str, str] | None = None,
) -> str:
    """Build a complete README: title, description, then every section.

    Installation, Usage and License are always present.  Known sections
    follow the template order; unknown ones come last, in request order.
    """
    requested = list(dict.fromkeys([*sections, *ALWAYS_INCLUDE]))
    ordered = sorted(requested, key=lambda name: _TEMPLATE_RANK.get(name, len(_TEMPLATE_RANK)))

    parts = [f"# {title}\n\n", f"## Description\n\n{summary}\n\n"]
    parts.extend(render_section(name, generated) for name in ordered)
    return "".join(parts)

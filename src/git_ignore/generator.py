"""
git_ignore.generator - Compose .gitignore Output
================================================

Turns a template index and an ordered list of requested names into the final
``.gitignore`` text.

Output Format
-------------
Each requested template becomes one section::

    ### <name> ###
    <template body, verbatim>

Sections are separated by a single blank line. Composition is all or
nothing: if any name is missing, nothing is returned.

Usage Example
-------------
>>> compose_gitignore({"a": "X\\n", "b": "Y\\n"}, ["a", "b"])
'### a ###\\nX\\n\\n### b ###\\nY\\n'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from git_ignore.errors import TemplateNotFoundError


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def format_section(name: str, body: str) -> str:
    """Render one header-plus-body section."""
    return f"### {name} ###\n{body}"


def available_templates(index: Mapping[str, str]) -> list[str]:
    """Return all template keys in sorted order."""
    return sorted(index)


def compose_gitignore(
    index: Mapping[str, str],
    names: Sequence[str],
    *,
    ignore_case: bool = False,
) -> str:
    """
    Compose a ``.gitignore`` document from the requested templates.

    Parameters
    ----------
    index : Mapping[str, str]
        Template key to template body, as built by ``build_index``.

    names : Sequence[str]
        Requested template names in output order. Duplicates are kept.

    ignore_case : bool, default=False
        Lowercase each name before looking it up. Index keys are always
        lowercase, so without this ``Node`` does not match ``node``.
        Headers keep the requested spelling either way.

    Returns
    -------
    str
        The composed document.

    Raises
    ------
    TemplateNotFoundError
        On the first name with no matching template.
    """
    sections: list[str] = []

    for name in names:
        key = name.lower() if ignore_case else name
        if key not in index:
            raise TemplateNotFoundError(name)
        sections.append(format_section(name, index[key]))

    return "\n".join(sections)

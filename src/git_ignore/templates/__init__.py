"""
git_ignore.templates - Jinja2 Completion Templates
==================================================

This package contains the Jinja2 templates used to render shell completion
scripts. Templates are named ``<shell>.j2`` after the values of
:class:`git_ignore.models.Shell`.

Available Templates
-------------------
    - bash.j2: bash completion (also hooks ``git ignore`` via ``_git_ignore``)
    - zsh.j2: zsh completion (``#compdef`` style)
    - fish.j2: fish completion

Template Context
----------------
    prog : str
        Program name being completed.

    func : str
        ``prog`` turned into a shell function identifier.

    options : tuple[CompletionOption, ...]
        Options accepted by the CLI.

    shells : list[str]
        Values accepted by ``--completion``.

Usage
-----
>>> from git_ignore.completions import render_completion
>>> script = render_completion("bash")
"""

# Templates are loaded by Jinja2's PackageLoader.

"""Placeholder substitution for template names and contents."""

from __future__ import annotations

import re

PLACEHOLDER = "Template"

# import { A, B } from './template/some/path'
_CONTEXT_IMPORT_RE = re.compile(
    r"""import\s+\{(.+?)\}\s+from\s+['"]\./template/(.+?)['"]"""
)


def capitalize(name: str) -> str:
    """Upper-case the first character of *name*, leaving the rest untouched.

    Unlike ``str.capitalize`` the remainder is not lowered::

        capitalize("billing")    -> "Billing"
        capitalize("orderItems") -> "OrderItems"
    """
    return name[:1].upper() + name[1:]


def substitute(text: str, replacement: str) -> str:
    """Replace every occurrence of the placeholder in *text* with *replacement*.

    Matching is case-sensitive and not restricted to whole words, so
    ``TemplateService`` becomes ``<replacement>Service``.
    """
    return text.replace(PLACEHOLDER, replacement)


def rewrite_context_imports(text: str, context_name: str) -> str:
    """Point imports of the template namespace at *context_name*.

    ``import { X } from './template/domain/X'`` becomes
    ``import {X} from './<context_name>/domain/X'``. The directory token is the
    raw context name, not the capitalised form used by :func:`substitute`.
    """

    def _replace(match: re.Match[str]) -> str:
        names = match.group(1).strip()
        relative_path = match.group(2).strip()
        return f"import {{{names}}} from './{context_name}/{relative_path}'"

    return _CONTEXT_IMPORT_RE.sub(_replace, text)

from __future__ import annotations

import re
import unicodedata

STOP_WORDS = frozenset(
    {
        # email thread prefixes
        "fw", "fwd", "re", "enc", "tr", "subject", "assunto", "encaminhado", "copy", "copia",
        # PT connectors
        "de", "do", "da", "dos", "das", "e", "o", "a", "os", "as",
        "em", "na", "no", "nas", "nos", "com", "para", "por",
        # EN connectors
        "of", "the", "and", "in", "at", "to", "for", "with", "by", "from",
    }
)

_SEPARATOR_RE = re.compile(r"[\W_]+")


def strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def tokenize(text: str) -> list[str]:
    """
    Canonicalize text into an ordered list of tokens.

    Examples:
        >>> tokenize("RE_Mapas")
        ['mapas']
        >>> tokenize("Relatório Final")
        ['relatorio', 'final']
    """
    folded = strip_accents(text.casefold())
    cleaned = _SEPARATOR_RE.sub(" ", folded)
    return [token for token in cleaned.split() if token and token not in STOP_WORDS]


def alnum_only(text: str) -> str:
    return _SEPARATOR_RE.sub("", text.lower())


def digits_only(text: str) -> str:
    return "".join(char for char in text if "0" <= char <= "9")

import re

from unitsense.domain.exceptions import UnknownUnitError, UnrecognizedTokenError
from unitsense.domain.models.tokens import Operator, Paren, Token
from unitsense.domain.models.units import BaseType, UnitValue
from unitsense.domain.registry import DEFAULT_REGISTRY, UnitRegistry
from unitsense.logging_config import get_logger

logger = get_logger(__name__)

_SYMBOLS: dict[str, Operator | Paren] = {
    **{op.value: op for op in Operator},
    **{paren.value: paren for paren in Paren},
}

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
_TOKEN_RE = re.compile(r"\d+(?:\.\d+)?|[a-z]+|[+\-*/()]")
_SYMBOL_RE = re.compile(r"([+\-*/()])")
_SPACES_RE = re.compile(r"\s+")


class Tokenizer:
    """
    Splits an expression into dimensioned values, operators and parentheses.

    A number directly followed by a known unit key becomes one value scaled
    to the unit's base dimension ("5 gb", "5gb"). A bare unit key stands for
    one of that unit ("hour"). A bare number is a dimensionless count.
    """

    def __init__(self, registry: UnitRegistry = DEFAULT_REGISTRY) -> None:
        self.registry = registry

    def _normalize(self, text: str) -> str:
        """Lowercases, pads operators with spaces and collapses whitespace."""
        text = _SYMBOL_RE.sub(r" \1 ", text.lower())
        return _SPACES_RE.sub(" ", text).strip()

    def _split(self, text: str) -> list[str]:
        words = []
        position = 0
        for match in _TOKEN_RE.finditer(text):
            residual = text[position : match.start()].strip()
            if residual:
                raise UnrecognizedTokenError(residual)
            words.append(match.group(0))
            position = match.end()

        residual = text[position:].strip()
        if residual:
            raise UnrecognizedTokenError(residual)
        return words

    def _to_base_value(self, number: float, key: str) -> UnitValue:
        unit = self.registry.lookup(key)
        if unit is None:
            raise UnknownUnitError(key)
        return UnitValue(number * unit.multiplier, unit.base, unit_key=key)

    def tokenize(self, text: str) -> list[Token]:
        words = self._split(self._normalize(text))

        tokens: list[Token] = []
        i = 0
        while i < len(words):
            word = words[i]
            next_word = words[i + 1] if i + 1 < len(words) else None

            if _NUMBER_RE.fullmatch(word):
                number = float(word)
                if next_word is not None and next_word in self.registry:
                    tokens.append(self._to_base_value(number, next_word))
                    i += 2
                    continue
                tokens.append(UnitValue(number, BaseType.UNIT))
            elif word in _SYMBOLS:
                tokens.append(_SYMBOLS[word])
            else:
                tokens.append(self._to_base_value(1.0, word))
            i += 1

        logger.debug("Tokenized %r into %d tokens", text, len(tokens))
        return tokens

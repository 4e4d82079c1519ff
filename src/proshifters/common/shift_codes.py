from dataclasses import dataclass
from typing import Optional, Sequence

from proshifters.common.defaults import SHIFT_CODE_MERGES, SHIFT_SWAP_GLYPHS


@dataclass(frozen=True)
class ShiftMatch:
    """Result of classifying one schedule cell: the canonical code, or no match."""
    code: Optional[str] = None

    @property
    def matched(self) -> bool:
        return self.code is not None


UNMATCHED = ShiftMatch()


def normalize_shift_code(raw: str) -> str:
    """
    Normalizes a raw schedule cell into shift-code form.

    Trims and upper-cases the cell, removes the shift trade arrows and folds the
    split coverage suffix into the full shift code (D2 -> D12, S2 -> S12, M2 -> M12).

    :param raw: The raw cell text.
    :return: The normalized code, which may still be unrecognized.
    """
    code = raw.strip().upper()
    for glyph in SHIFT_SWAP_GLYPHS:
        code = code.replace(glyph, '')
    for partial, full in SHIFT_CODE_MERGES:
        code = code.replace(partial, full)
    return code


def classify_shift_code(raw: str, valid_codes: Sequence[str]) -> ShiftMatch:
    code = normalize_shift_code(raw)
    if code in valid_codes:
        return ShiftMatch(code)
    return UNMATCHED

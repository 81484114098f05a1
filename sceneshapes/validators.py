"""Numeric input validators that reject out-of-range input early."""

from __future__ import annotations

import enum
import math
import re

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]*")
_DOUBLE_PATTERN = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?([eE][+-]?[0-9]*)?")


class State(enum.IntEnum):
    """Outcome of validating partial user input."""

    INVALID = 0
    INTERMEDIATE = 1
    ACCEPTABLE = 2


def _refine(state: State, text: str, extracted: float, bottom: float, top: float) -> State:
    if state is not State.INTERMEDIATE or not text:
        return state
    if extracted > 0:
        if extracted > top and -extracted < bottom:
            return State.INVALID
    elif extracted < bottom:
        return State.INVALID
    return state


def _digit_count(value: int) -> int:
    return len(str(abs(value)))


class IntValidator:
    """Accepts integers in ``[bottom, top]``; rejects input that can never fit."""

    def __init__(self, bottom: int = _INT32_MIN, top: int = _INT32_MAX) -> None:
        self.bottom = bottom
        self.top = top

    def _base_state(self, text: str) -> State:
        if not text:
            return State.INTERMEDIATE
        if not _INT_PATTERN.fullmatch(text):
            return State.INVALID
        minus = text.startswith("-")
        plus = text.startswith("+")
        if self.bottom >= 0 and minus:
            return State.INVALID
        if self.top < 0 and plus:
            return State.INVALID
        if len(text) == 1 and (plus or minus):
            return State.INTERMEDIATE

        entered = int(text)
        if not _INT64_MIN <= entered <= _INT64_MAX:
            return State.INVALID
        if self.bottom <= entered <= self.top:
            fits = _INT32_MIN <= entered <= _INT32_MAX
            return State.ACCEPTABLE if fits else State.INTERMEDIATE

        digits = len(text.lstrip("+-"))
        if entered >= 0:
            too_long = digits > _digit_count(self.top)
            if entered > self.top and -entered < self.bottom and too_long:
                return State.INVALID
            return State.INTERMEDIATE
        if entered < self.bottom and digits > _digit_count(self.bottom):
            return State.INVALID
        return State.INTERMEDIATE

    def validate(self, text: str) -> State:
        state = self._base_state(text)
        try:
            extracted = int(text)
        except ValueError:
            extracted = 0
        return _refine(state, text, extracted, self.bottom, self.top)


class DoubleValidator:
    """Accepts floating-point numbers in ``[bottom, top]`` with at most ``decimals`` decimals."""

    def __init__(
        self, bottom: float = -math.inf, top: float = math.inf, decimals: int = 1000
    ) -> None:
        self.bottom = bottom
        self.top = top
        self.decimals = decimals

    def _base_state(self, text: str) -> State:
        if not text:
            return State.INTERMEDIATE
        match = _DOUBLE_PATTERN.fullmatch(text)
        if not match:
            return State.INVALID
        sign, integer, fraction, exponent = match.groups()
        if self.bottom >= 0 and sign == "-":
            return State.INVALID
        if self.top < 0 and sign == "+":
            return State.INVALID
        if fraction and len(fraction) > self.decimals:
            return State.INVALID
        if not integer and not fraction:
            return State.INVALID if exponent else State.INTERMEDIATE
        try:
            value = float(text)
        except ValueError:
            return State.INTERMEDIATE
        if not math.isfinite(value):
            return State.INVALID
        if self.bottom <= value <= self.top:
            return State.ACCEPTABLE
        return State.INTERMEDIATE

    def validate(self, text: str) -> State:
        state = self._base_state(text)
        try:
            extracted = float(text)
        except ValueError:
            extracted = 0.0
        return _refine(state, text, extracted, self.bottom, self.top)
"""Rough checks of how running time grows with input size."""

from __future__ import annotations

from typing import Any


class Complexity:
    """Compares measured timings against predictions within a relative tolerance."""

    DEFAULT_PREDICTION_TOLERANCE = 0.2
    DEFAULT_VERBOSE = False

    def __init__(
        self,
        tolerance: float = DEFAULT_PREDICTION_TOLERANCE,
        verbose: bool = DEFAULT_VERBOSE,
    ) -> None:
        self.tolerance = tolerance
        self.verbose = verbose

    def check_constant_time(self, t1: Any, n1: int, t2: Any, n2: int) -> bool:
        """Check that two timings are about the same, regardless of input size."""
        return self._check_prediction(float(t1.microseconds), float(t2.microseconds))

    def check_linear(self, t1: Any, n1: int, t2: Any, n2: int) -> bool:
        """Check a linear prediction scaled from the first timing."""
        print("WARNING: Complexity.check_linear() is untested!")
        prediction = self._microseconds_per_n(t1, n1) * n2
        return self._check_prediction(float(t1.microseconds), float(prediction))

    def check_polynomial(self, t1: Any, n1: int, t2: Any, n2: int, power: float) -> bool:
        """Check the second timing against a polynomial prediction from the first."""
        print("WARNING: Complexity.check_polynomial() is untested!")
        offset = float(t1.microseconds) / (float(n1) ** power)
        prediction = float(n2) ** power + offset
        return self._check_prediction(float(t2.microseconds), prediction)

    @staticmethod
    def _microseconds_per_n(t: Any, n: int) -> float:
        if n == 0:
            return 0.0
        return float(t.microseconds) / float(n)

    def _check_prediction(self, actual: float, predicted: float) -> bool:
        if actual == 0.0:
            if self.verbose:
                print("Complexity.check_prediction() - Actual was 0.0; Returning false")
            return False
        error = abs(actual - predicted) / actual
        result = error <= self.tolerance
        message = (
            f"Complexity.check_prediction() - Prediction {'correct' if result else 'incorrect'}"
            f" ({predicted:g} vs. {actual:g})"
            f"; Error {error * 100:g}% {'within' if result else 'outside'}"
            f" tolerance of {self.tolerance * 100:g}%"
        )
        if self.verbose or not result:
            print(f"> {message}\n")
        return result
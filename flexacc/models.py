"""
Core Data Models for Flex Character Accuracy.

Defines the data structures shared by the evaluators:
- CostFunction: edit operation weights selectable by key
- CoefficientTuple: weighting scheme used to rank line alignments
- AlignmentResult: best window alignment of one line pair
- TrialOutcome: totals produced by one greedy matching trial
- CharacterAccuracyResult / FlexCharacterAccuracyResult: evaluation results
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidArgumentError


class CostFunction(str, Enum):
    """Edit operation costs (insertion, deletion, substitution).

    The edit transforms the candidate text into the reference text:
    a deletion drops a surplus candidate character, an insertion supplies
    a missing reference character.
    """
    INS1_DEL1_SUBST1 = "INS1_DEL1_SUBST1"
    INS1_DEL1_SUBST2 = "INS1_DEL1_SUBST2"
    INS1_DEL0_SUBST1 = "INS1_DEL0_SUBST1"

    @property
    def key(self) -> str:
        return self.value

    @property
    def insertion(self) -> int:
        return _COSTS[self][0]

    @property
    def deletion(self) -> int:
        return _COSTS[self][1]

    @property
    def substitution(self) -> int:
        return _COSTS[self][2]

    @property
    def deletion_penalty(self) -> int:
        """Cost per character of candidate text left unmatched."""
        return self.deletion

    @classmethod
    def from_key(cls, key: str) -> "CostFunction":
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise InvalidArgumentError(
                f"Unknown cost function '{key}' (expected one of: {valid})"
            ) from None


_COSTS = {
    CostFunction.INS1_DEL1_SUBST1: (1, 1, 1),
    CostFunction.INS1_DEL1_SUBST2: (1, 1, 2),
    CostFunction.INS1_DEL0_SUBST1: (1, 0, 1),
}


class CoefficientTuple(NamedTuple):
    """Weights ranking candidate line-pair alignments."""
    edit_dist_weight: int
    length_diff_weight: int
    offset_weight: int
    length_weight: int


@dataclass(frozen=True)
class AlignmentResult:
    """Best alignment of the shorter line inside the longer one.

    ``min_edit_dist`` is None when no valid alignment exists.
    """
    min_edit_dist: Optional[int]
    substring_pos: int = 0
    substring_length: int = 0
    length_diff: int = 0

    @property
    def offset(self) -> int:
        # 0 at either edge of the longer line, growing toward its middle
        if self.length_diff <= 1:
            return 0
        half = self.length_diff // 2
        return half - abs(self.substring_pos - half)

    def penalty(self, coefficients: CoefficientTuple) -> float:
        """Ranking score for this alignment; lower is better."""
        if self.min_edit_dist is None:
            return float("inf")
        return (
            self.min_edit_dist * coefficients.edit_dist_weight
            + self.length_diff * coefficients.length_diff_weight
            + self.offset * coefficients.offset_weight
            - self.substring_length * coefficients.length_weight
        )


@dataclass(frozen=True)
class TrialOutcome:
    """Totals of one greedy matching trial."""
    total_edit_distance: int
    reference_char_count: int
    candidate_char_count: int

    @property
    def accuracy(self) -> float:
        if self.reference_char_count <= 0:
            return 0.0
        acc = (self.reference_char_count - self.total_edit_distance) / self.reference_char_count
        return max(0.0, acc)


class CharacterAccuracyResult(BaseModel):
    """Result of the plain (order-sensitive) character accuracy."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    RESULT_NAME: ClassVar[str] = "CharacterAccuracyResult"
    caption: ClassVar[str] = "Character Accuracy"

    accuracy: float = Field(
        default=0.0, ge=0.0, le=1.0, alias="characterAccuracy",
        description="Character accuracy in [0, 1]",
    )
    reference_char_count: int = Field(
        default=0, ge=0, alias="charsInGroundTruth",
        description="Number of characters in the ground truth",
    )
    candidate_char_count: int = Field(
        default=0, ge=0, alias="charsInResult",
        description="Number of characters in the evaluated result",
    )

    def __str__(self) -> str:
        return f" {self.caption} "


class FlexCharacterAccuracyResult(BaseModel):
    """Result of the reading-order tolerant flex character accuracy."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    RESULT_NAME: ClassVar[str] = "CharacterAccuracyResult"
    caption: ClassVar[str] = "Flex Character Accuracy"

    accuracy: float = Field(
        default=0.0, ge=0.0, le=1.0, alias="flexCharacterAccuracy",
        description="Flex character accuracy in [0, 1]",
    )
    reference_char_count: int = Field(
        default=0, ge=0, alias="charsInGroundTruth",
        description="Number of characters in the ground truth lines",
    )
    candidate_char_count: int = Field(
        default=0, ge=0, alias="charsInResult",
        description="Number of characters in the result lines",
    )

    def __str__(self) -> str:
        return f" {self.caption} "

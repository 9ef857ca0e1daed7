from pydantic import ValidationError
import pytest

from kwsearch.data_models.occurrence import Occurrence


def test_bumped_returns_new_instance() -> None:
    occ = Occurrence(doc_id="d", frequency=1)
    bumped = occ.bumped()
    assert bumped == Occurrence(doc_id="d", frequency=2)
    assert occ.frequency == 1


def test_frozen() -> None:
    occ = Occurrence(doc_id="d", frequency=1)
    with pytest.raises(ValidationError):
        occ.frequency = 5  # type: ignore[misc]


def test_frequency_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Occurrence(doc_id="d", frequency=0)

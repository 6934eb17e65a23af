"""Pytest configuration and fixtures for tabstats tests."""

import pytest


@pytest.fixture
def passenger_rows() -> list[dict]:
    """Return a small passenger-manifest row set."""
    return [
        {"PassengerId": 1, "Survived": 0, "Pclass": 3, "Sex": "male", "Age": 22, "Fare": 7.25, "Embarked": "S"},
        {"PassengerId": 2, "Survived": 1, "Pclass": 1, "Sex": "female", "Age": 38, "Fare": 71.2833, "Embarked": "C"},
        {"PassengerId": 3, "Survived": 1, "Pclass": 3, "Sex": "female", "Age": 26, "Fare": 7.925, "Embarked": "S"},
        {"PassengerId": 4, "Survived": 1, "Pclass": 1, "Sex": "female", "Age": 35, "Fare": 53.1, "Embarked": "S"},
        {"PassengerId": 5, "Survived": 0, "Pclass": 3, "Sex": "male", "Age": None, "Fare": 8.05, "Embarked": ""},
        {"PassengerId": 6, "Survived": 0, "Pclass": 3, "Sex": "male", "Age": None, "Fare": 8.4583, "Embarked": "Q"},
    ]


@pytest.fixture
def age_sex_rows() -> list[dict]:
    """Return the three-row Age/Sex example."""
    return [
        {"Age": 22, "Sex": "male"},
        {"Age": 38, "Sex": "female"},
        {"Age": None, "Sex": "female"},
    ]


@pytest.fixture
def test_set_rows() -> list[dict]:
    """Return rows shaped like a held-out set (no Survived column)."""
    return [
        {"PassengerId": 7, "Pclass": 2, "Sex": "male", "Age": 54, "Fare": 51.8625, "Embarked": "S"},
        {"PassengerId": 8, "Pclass": 3, "Sex": "female", "Age": 2, "Fare": 21.075, "Embarked": "S"},
    ]

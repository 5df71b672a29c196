"""Tests for the brand, body type and model listing use cases."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from carfinder.domain.errors import ValidationError
from carfinder.ports.car_catalog_repository import CarCatalogRepository
from carfinder.use_cases.list_car_brands import ListCarBrands
from carfinder.use_cases.list_car_models import ListCarModels, ListCarModelsRequest
from carfinder.use_cases.list_car_types import ListCarTypes


@pytest.fixture()
def mock_repository() -> Mock:
    return Mock(spec=CarCatalogRepository)


def test_list_brands(mock_repository: Mock) -> None:
    mock_repository.list_brands.return_value = ["Audi", "BMW"]

    assert ListCarBrands(mock_repository).execute().brands == ["Audi", "BMW"]


def test_list_types(mock_repository: Mock) -> None:
    mock_repository.list_types.return_value = ["SUV"]

    assert ListCarTypes(mock_repository).execute().types == ["SUV"]


def test_list_models_strips_brand(mock_repository: Mock) -> None:
    mock_repository.list_models.return_value = ["Civic"]

    result = ListCarModels(mock_repository).execute(ListCarModelsRequest(brand="  Honda "))

    assert result.models == ["Civic"]
    mock_repository.list_models.assert_called_once_with("Honda")


def test_list_models_rejects_blank_brand(mock_repository: Mock) -> None:
    with pytest.raises(ValidationError):
        ListCarModels(mock_repository).execute(ListCarModelsRequest(brand=" "))

    mock_repository.list_models.assert_not_called()

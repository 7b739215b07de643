import pytest

from services.catalog.applications.browse_catalog import BrowseCatalogService
from services.shared.domain import HotelId, ResourceNotFoundException


class TestBrowseCatalogService:
    def test_get_hotel(self, mock_repository, create_hotel):
        hotel = create_hotel()
        mock_repository.find_hotel.return_value = hotel
        service = BrowseCatalogService(repository=mock_repository)

        assert service.get_hotel(HotelId(value="hotel-1")) is hotel

    def test_get_unknown_hotel_is_not_found(self, mock_repository):
        mock_repository.find_hotel.return_value = None
        service = BrowseCatalogService(repository=mock_repository)

        with pytest.raises(ResourceNotFoundException, match="Hotel not found"):
            service.get_hotel(HotelId(value="missing"))

    def test_list_rooms_of_unknown_hotel_is_empty(self, mock_repository):
        mock_repository.find_rooms_by_hotel.return_value = []
        service = BrowseCatalogService(repository=mock_repository)

        assert service.list_rooms(HotelId(value="missing")) == []


class TestRoom:
    def test_can_accommodate(self, create_room):
        room = create_room(capacity=2)

        assert room.can_accommodate(1)
        assert room.can_accommodate(2)
        assert not room.can_accommodate(3)

    def test_zero_capacity_raises_error(self, create_room):
        with pytest.raises(ValueError, match="capacity"):
            create_room(capacity=0)

"""Tests for Room and RoomRegistry."""

from privateroom.rooms.registry import DEFAULT_CAPACITY, DEFAULT_ROOM_NAME, Room, RoomRegistry


class TestRoom:
    """Test the Room entity."""

    def test_defaults(self):
        """A bare room uses the default name and capacity."""
        room = Room(id=0)
        assert room.name == DEFAULT_ROOM_NAME
        assert room.capacity == DEFAULT_CAPACITY
        assert room.is_empty

    def test_add_member_respects_capacity(self):
        """Adding beyond capacity is refused."""
        room = Room(id=0, capacity=2, members=[1])
        assert room.add_member(2) is True
        assert room.add_member(3) is False
        assert room.members == [1, 2]
        assert room.is_full

    def test_add_member_twice_is_refused(self):
        """A session appears at most once."""
        room = Room(id=0, members=[1])
        assert room.add_member(1) is False
        assert room.members == [1]

    def test_remove_member(self):
        """Removing is idempotent."""
        room = Room(id=0, members=[1, 2])
        assert room.remove_member(1) is True
        assert room.remove_member(1) is False
        assert room.members == [2]

    def test_other_members_excludes_session(self):
        room = Room(id=0, members=[1, 2, 3])
        assert room.other_members(2) == [1, 3]


class TestRoomRegistry:
    """Test RoomRegistry id allocation, lookup, listing and sweeping."""

    def test_first_room_gets_id_zero(self):
        registry = RoomRegistry()
        room = registry.create_room(founder_id=7)
        assert room.id == 0
        assert room.members == [7]

    def test_ids_are_max_plus_one(self):
        """Ids follow the current maximum, not a counter."""
        registry = RoomRegistry()
        first = registry.create_room(1)
        second = registry.create_room(2)
        assert (first.id, second.id) == (0, 1)

        second.remove_member(2)
        registry.sweep_empty()
        assert registry.create_room(3).id == 1

    def test_create_uses_registry_defaults(self):
        registry = RoomRegistry(default_name="Lounge", default_capacity=4, default_private=False)
        room = registry.create_room(1)
        assert room.name == "Lounge"
        assert room.capacity == 4
        assert room.private is False

    def test_create_with_explicit_values(self):
        registry = RoomRegistry()
        room = registry.create_room(1, name="Alpha", capacity=2, private=False)
        assert room.name == "Alpha"
        assert room.capacity == 2
        assert room.private is False

    def test_get_unknown_room(self):
        assert RoomRegistry().get(5) is None

    def test_list_public_hides_private_rooms(self):
        registry = RoomRegistry()
        public = registry.create_room(1, private=False)
        registry.create_room(2, private=True)
        assert registry.list_public() == [public]

    def test_sweep_removes_only_empty_rooms(self):
        """Sweep deletes every empty room and leaves the rest alone."""
        registry = RoomRegistry()
        keep = registry.create_room(1)
        drop_a = registry.create_room(2)
        drop_b = registry.create_room(3)
        drop_a.remove_member(2)
        drop_b.remove_member(3)

        removed = registry.sweep_empty()

        assert {room.id for room in removed} == {drop_a.id, drop_b.id}
        assert registry.rooms() == [keep]
        assert keep.members == [1]

    def test_sweep_on_empty_registry(self):
        assert RoomRegistry().sweep_empty() == []

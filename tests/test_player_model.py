"""
Unit tests for the Player model.

Tests roster entry helpers and dictionary serialization, including the
camelCase keys sent by browser clients.
"""
import unittest

from gameplanner.models.player import Player, PlayerRole


class TestPlayer(unittest.TestCase):
    """Test Player model."""

    def test_defaults(self) -> None:
        player = Player(id="a1")

        self.assertEqual(player.name, "")
        self.assertEqual(player.role, PlayerRole.OUTFIELD)
        self.assertIsNone(player.manual_minutes)
        self.assertIsNone(player.minutes)
        self.assertFalse(player.is_active)

    def test_is_active_ignores_whitespace_names(self) -> None:
        self.assertFalse(Player(id="a1", name="   ").is_active)
        self.assertTrue(Player(id="a1", name="Mia").is_active)

    def test_is_goalkeeper(self) -> None:
        self.assertTrue(Player(id="g", name="Ella", role=PlayerRole.GOALKEEPER).is_goalkeeper)
        self.assertFalse(Player(id="o", name="Mia").is_goalkeeper)

    def test_to_dict(self) -> None:
        player = Player(id="a1", name="Mia", manual_minutes=30, preferred_position="ST")

        self.assertEqual(player.to_dict(), {
            "id": "a1",
            "name": "Mia",
            "role": "Outfield",
            "manual_minutes": 30,
            "minutes": None,
            "preferred_position": "ST",
            "secondary_position": "",
        })

    def test_from_dict_round_trip(self) -> None:
        player = Player(id="g1", name="Ella", role=PlayerRole.GOALKEEPER, minutes=60)

        self.assertEqual(Player.from_dict(player.to_dict()), player)

    def test_from_dict_accepts_camel_case(self) -> None:
        player = Player.from_dict({
            "id": "x",
            "name": "Mia",
            "role": "GK",
            "manualMinutes": "25",
            "preferredPosition": "GK",
            "secondaryPosition": "CD",
        })

        self.assertEqual(player.role, PlayerRole.GOALKEEPER)
        self.assertEqual(player.manual_minutes, 25)
        self.assertEqual(player.preferred_position, "GK")
        self.assertEqual(player.secondary_position, "CD")

    def test_from_dict_blank_manual_minutes_means_unset(self) -> None:
        player = Player.from_dict({"id": "x", "name": "Mia", "manualMinutes": ""})

        self.assertIsNone(player.manual_minutes)

    def test_from_dict_requires_id(self) -> None:
        with self.assertRaises(ValueError):
            Player.from_dict({"name": "Mia"})

    def test_from_dict_rejects_negative_minutes(self) -> None:
        with self.assertRaises(ValueError):
            Player.from_dict({"id": "x", "name": "Mia", "manual_minutes": -5})

    def test_from_dict_rejects_unknown_role(self) -> None:
        with self.assertRaises(ValueError):
            Player.from_dict({"id": "x", "name": "Mia", "role": "Striker"})


if __name__ == "__main__":
    unittest.main()

"""Headshot URL lookup for player records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


HEADSHOT_URL_TEMPLATE = (
    "https://ak-static.cms.nba.com/wp-content/uploads/headshots/nba/latest/260x190/{player_id}.png"
)
FALLBACK_IMAGE_URL = "https://cdn.nba.com/logos/nba/1610612739/global/L/logo.svg"

NBA_HEADSHOT_IDS: Mapping[str, str] = {
    "Aaron Gordon": "203932",
    "Aaron Holiday": "1628988",
    "Abdel Nader": "1627846",
    "Al Horford": "201143",
    "Al-Farouq Aminu": "202329",
    "Alan Williams": "1626210",
    "Alec Burks": "202692",
    "Alex Abrines": "203518",
    "Alex Caruso": "1627936",
    "Alex Len": "203458",
    "Anthony Davis": "203076",
    "Bam Adebayo": "1628389",
    "Ben Simmons": "1627732",
    "Bradley Beal": "203078",
    "Brandon Ingram": "1627742",
    "Brook Lopez": "201572",
    "CJ McCollum": "203468",
    "Chris Paul": "101108",
    "Damian Lillard": "203081",
    "De'Aaron Fox": "1628368",
    "DeMar DeRozan": "201942",
    "Deandre Ayton": "1629028",
    "Devin Booker": "1626164",
    "Domantas Sabonis": "1627734",
    "Donovan Mitchell": "1628378",
    "Draymond Green": "203110",
    "Dwyane Wade": "2548",
    "Giannis Antetokounmpo": "203507",
    "Gordon Hayward": "202330",
    "James Harden": "201935",
    "Jamal Murray": "1627750",
    "Jaylen Brown": "1627759",
    "Jayson Tatum": "1628369",
    "Jimmy Butler": "202710",
    "Joel Embiid": "203954",
    "John Collins": "1628381",
    "Jrue Holiday": "201950",
    "Karl-Anthony Towns": "1626157",
    "Kawhi Leonard": "202695",
    "Kevin Durant": "201142",
    "Khris Middleton": "203114",
    "Klay Thompson": "202691",
    "Kristaps Porzingis": "204001",
    "Kyle Lowry": "200768",
    "Kyrie Irving": "202681",
    "LaMarcus Aldridge": "200746",
    "LeBron James": "2544",
    "Luka Doncic": "1629029",
    "Myles Turner": "1626167",
    "Nikola Jokic": "203999",
    "Nikola Vucevic": "202696",
    "Pascal Siakam": "1627783",
    "Paul George": "202331",
    "Rudy Gobert": "203497",
    "Russell Westbrook": "201566",
    "Shai Gilgeous-Alexander": "1628983",
    "Stephen Curry": "201939",
    "Tobias Harris": "202699",
    "Trae Young": "1629027",
    "Victor Oladipo": "203506",
    "Zach LaVine": "203897",
    "Zion Williamson": "1629627",
}


@dataclass(frozen=True)
class HeadshotResolver:
    """Map a player name to a headshot URL, or the league logo when unknown."""

    table: Mapping[str, str] = field(default_factory=lambda: dict(NBA_HEADSHOT_IDS))
    url_template: str = HEADSHOT_URL_TEMPLATE
    fallback_url: str = FALLBACK_IMAGE_URL

    def __call__(self, name: str) -> str:
        player_id = self.table.get(name.strip())
        if not player_id:
            return self.fallback_url
        return self.url_template.format(player_id=player_id)


def default_headshot_resolver() -> HeadshotResolver:
    return HeadshotResolver()

"""Known alternate names for major clubs.

Keys are canonical registry names; values are the variations seen in
Wikipedia articles and common usage.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Mapping, Tuple


@dataclass(frozen=True)
class AliasTable:
    """Immutable, ordered mapping of canonical team name -> alternate names."""

    entries: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "AliasTable":
        return cls(tuple((canonical, tuple(aliases)) for canonical, aliases in mapping.items()))

    def items(self) -> Iterator[Tuple[str, Tuple[str, ...]]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


TEAM_ALIASES: Dict[str, Tuple[str, ...]] = {
    # English clubs
    "Manchester United F.C.": ("Manchester United", "Man United", "Man Utd", "MUFC", "Manchester Utd"),
    "Manchester City F.C.": ("Manchester City", "Man City", "MCFC", "City"),
    "Liverpool": ("Liverpool FC", "LFC", "The Reds"),
    "Chelsea": ("Chelsea FC", "CFC", "The Blues"),
    "Arsenal": ("Arsenal FC", "AFC", "The Gunners"),
    "Tottenham Hotspur": ("Tottenham", "Spurs", "THFC", "Tottenham Hotspurs", "Hotspur"),
    "Newcastle United": ("Newcastle", "NUFC", "Newcastle Utd", "The Magpies"),
    "West Ham United": ("West Ham", "WHUFC", "West Ham Utd", "The Hammers"),
    "Aston Villa": ("Villa", "AVFC"),
    "Brighton & Hove Albion": ("Brighton", "BHAFC", "Brighton and Hove Albion"),
    "Wolverhampton Wanderers": ("Wolves", "Wolverhampton", "Wolves FC"),
    "Leicester City": ("Leicester", "LCFC"),
    "Nottingham Forest": ("Forest", "NFFC", "Notts Forest"),
    "Everton": ("Everton FC", "EFC", "The Toffees"),
    "Crystal Palace": ("Palace", "CPFC"),
    "Fulham": ("Fulham FC", "FFC"),
    "Bournemouth": ("AFC Bournemouth", "AFCB"),
    "Brentford": ("Brentford FC", "BFC"),
    "Ipswich Town": ("Ipswich", "ITFC"),

    # Spanish clubs
    "Real Madrid": ("Real Madrid CF", "Real", "Madrid"),
    "Barcelona": ("FC Barcelona", "Barca", "Barça", "FCB"),
    "Atletico Madrid": ("Atlético Madrid", "Atletico", "Atlético", "Atletico de Madrid"),
    "Sevilla FC": ("Sevilla",),
    "Real Betis": ("Betis", "Real Betis Balompié"),
    "Real Sociedad": ("Sociedad", "La Real"),
    "Athletic Bilbao": ("Athletic Club", "Athletic", "Bilbao"),
    "Villarreal CF": ("Villarreal", "Yellow Submarine"),
    "Valencia": ("Valencia CF",),

    # German clubs
    "Bayern Munich": ("FC Bayern Munich", "Bayern München", "Bayern", "FC Bayern"),
    "Borussia Dortmund": ("BVB", "Dortmund"),
    "RB Leipzig": ("Leipzig", "RasenBallsport Leipzig"),
    "Bayer Leverkusen": ("Leverkusen", "Bayer 04"),
    "Eintracht Frankfurt": ("Frankfurt", "SGE"),
    "VfB Stuttgart": ("Stuttgart",),
    "Borussia Mönchengladbach": ("Mönchengladbach", "Gladbach", "Borussia M'gladbach"),
    "VfL Wolfsburg": ("Wolfsburg",),
    "SC Freiburg": ("Freiburg",),
    "TSG Hoffenheim": ("Hoffenheim", "1899 Hoffenheim"),

    # Italian clubs
    "Juventus": ("Juventus FC", "Juve", "Juventus Turin"),
    "AC Milan": ("Milan", "A.C. Milan", "AC Milan 1899"),
    "Inter Milan": ("Internazionale", "Inter", "FC Internazionale Milano"),
    "AS Roma": ("Roma", "AS Roma 1927"),
    "S.S. Lazio": ("Lazio", "SS Lazio"),
    "Napoli": ("SSC Napoli", "S.S.C. Napoli"),
    "Atalanta BC": ("Atalanta", "Atalanta Bergamo"),
    "Fiorentina": ("ACF Fiorentina", "Viola"),
    "Torino FC": ("Torino",),
    "Bologna": ("Bologna FC", "BFC"),

    # French clubs
    "Paris Saint-Germain": ("PSG", "Paris SG", "Paris St-Germain"),
    "Olympique de Marseille": ("Marseille", "OM", "Olympique Marseille"),
    "AS Monaco": ("Monaco",),
    "Olympique Lyonnais": ("Lyon", "OL", "Olympique Lyon"),
    "LOSC Lille": ("Lille", "LOSC"),
    "Nice": ("OGC Nice", "Nizza"),
    "Stade Rennais": ("Rennes", "Stade Rennais FC"),
    "RC Lens": ("Lens", "Racing Club de Lens"),
    "Brest": ("Stade Brestois 29", "Stade Brest"),
    "Reims": ("Stade de Reims", "Stade Reims"),

    # Portuguese clubs
    "FC Porto": ("Porto",),
    "SL Benfica": ("Benfica",),
    "Sporting CP": ("Sporting Lisbon", "Sporting", "Sporting Clube de Portugal"),
    "SC Braga": ("Braga", "Sporting Braga"),

    # Dutch clubs
    "Ajax": ("AFC Ajax", "Ajax Amsterdam"),
    "PSV Eindhoven": ("PSV",),
    "Feyenoord": ("Feyenoord Rotterdam",),
    "AZ Alkmaar": ("AZ",),

    # Belgian clubs
    "Club Brugge": ("Club Brugge KV", "Brugge"),
    "Anderlecht": ("RSC Anderlecht", "RSC Anderlecht Brussels"),
}

DEFAULT_ALIASES = AliasTable.from_mapping(TEAM_ALIASES)

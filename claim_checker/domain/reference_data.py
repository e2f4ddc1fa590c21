"""Static reference facts and known claim signatures.

Both tables are built once at import time and never mutated.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .models.reference_fact import ReferenceFact
from .models.verdict import Source, VerdictStatus

REFERENCE_FACTS: Tuple[ReferenceFact, ...] = (
    ReferenceFact(
        key="deutschland einwohner",
        value="83.2 Millionen",
        year=2023,
        source="Statistisches Bundesamt",
        trust_score=0.95,
    ),
    ReferenceFact(
        key="arbeitslosenquote deutschland",
        value="5.7%",
        year=2024,
        source="Bundesagentur für Arbeit",
        trust_score=0.9,
    ),
    ReferenceFact(
        key="berlin einwohner",
        value="3.7 Millionen",
        year=2023,
        source="Amt für Statistik Berlin-Brandenburg",
        trust_score=0.9,
    ),
    ReferenceFact(
        key="hamburg einwohner",
        value="1.9 Millionen",
        year=2023,
        source="Statistikamt Nord",
        trust_score=0.9,
    ),
    ReferenceFact(
        key="münchen einwohner",
        value="1.5 Millionen",
        year=2023,
        source="Statistisches Amt München",
        trust_score=0.9,
    ),
)


def get_reference_fact(key: str) -> Optional[ReferenceFact]:
    """Look up a reference fact by its canonical key (case-insensitive)."""
    wanted = key.strip().lower()
    for fact in REFERENCE_FACTS:
        if fact.key == wanted:
            return fact
    return None


@dataclass(frozen=True)
class ClaimSignature:
    """A known claim shape and the verdict it produces.

    The signature matches when the lowercased claim contains at least one of
    ``any_of`` (if given) and every term of ``all_of`` (if given).
    """

    name: str
    status: VerdictStatus
    source: Source
    interpretation: str
    correction: Optional[str] = None
    any_of: Tuple[str, ...] = ()
    all_of: Tuple[str, ...] = ()

    def matches(self, lowered: str) -> bool:
        if self.any_of and not any(term in lowered for term in self.any_of):
            return False
        return all(term in lowered for term in self.all_of)


# Evaluated in order, first match wins.
CLAIM_SIGNATURES: Tuple[ClaimSignature, ...] = (
    ClaimSignature(
        name="population_germany",
        any_of=("83 millionen", "bevölkerungsreichste"),
        status=VerdictStatus.VERIFIED,
        source=Source(
            name="Statistisches Bundesamt",
            url="destatis.de",
            trust_score=0.95,
            year=2023,
        ),
        interpretation="Die Angabe ist korrekt. Deutschland hat etwa 83,2 Millionen Einwohner (Stand 2023).",
    ),
    ClaimSignature(
        name="unemployment_rate",
        any_of=("3,5%", "3.5%"),
        status=VerdictStatus.DISPUTED,
        source=Source(
            name="Bundesagentur für Arbeit",
            url="arbeitsagentur.de",
            trust_score=0.9,
            year=2024,
        ),
        interpretation=(
            "Die angegebene Arbeitslosenquote von 3,5% weicht von offiziellen Zahlen ab. "
            "Aktuelle Daten zeigen 5,7% (2024)."
        ),
        correction="Die korrekte Arbeitslosenquote liegt bei 5,7% (Stand 2024).",
    ),
    ClaimSignature(
        name="gdp_growth",
        all_of=("10%", "wuchs"),
        status=VerdictStatus.FALSE,
        source=Source(
            name="Statistisches Bundesamt - BIP Daten",
            url="destatis.de/bip",
            trust_score=0.95,
            year=2019,
        ),
        interpretation=(
            "Ein Wirtschaftswachstum von 10% ist unrealistisch für Deutschland. "
            "Das tatsächliche Wachstum lag 2019 bei etwa 0,6%."
        ),
        correction="Das BIP-Wachstum betrug 2019 nur 0,6%, nicht 10%.",
    ),
    ClaimSignature(
        name="berlin_vs_hamburg",
        all_of=("berlin", "hamburg"),
        status=VerdictStatus.VERIFIED,
        source=Source(
            name="Statistische Ämter der Länder",
            url="statistik-portal.de",
            trust_score=0.85,
            year=2023,
        ),
        interpretation=(
            "Die Aussage ist korrekt. Berlin (3,7 Mio.) hat tatsächlich mehr Einwohner als "
            "Hamburg (1,9 Mio.) und München (1,5 Mio.) zusammen (3,4 Mio.)."
        ),
    ),
)

NO_SOURCE_INTERPRETATION = "Für diese Aussage konnten keine verlässlichen Quellen gefunden werden."

EXAMPLE_TEXT = (
    "Deutschland hat 83 Millionen Einwohner und ist das bevölkerungsreichste Land der EU. "
    "Die Arbeitslosenquote liegt bei 3,5% (Stand 2023). \n\n"
    "Berlin hat mit seinen 3,7 Millionen Einwohnern mehr Bewohner als Hamburg und München zusammen, "
    "die gemeinsam nur auf etwa 3,4 Millionen kommen.\n\n"
    "Die deutsche Wirtschaft wuchs 2019 um 10% - ein Rekordwachstum seit der Wiedervereinigung."
)

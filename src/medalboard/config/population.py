"""Population counts keyed by NOC short code (mid-2023 estimates)."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional


_POPULATION: Dict[str, int] = {
    "AFG": 42_239_854,
    "AIN": 144_444_359,
    "ALB": 2_832_439,
    "ALG": 45_606_480,
    "ARG": 45_773_884,
    "ARM": 2_777_970,
    "AUS": 26_439_111,
    "AUT": 8_958_960,
    "AZE": 10_412_651,
    "BAH": 412_623,
    "BEL": 11_686_140,
    "BOT": 2_675_352,
    "BRA": 216_422_446,
    "BRN": 1_485_509,
    "BUL": 6_687_717,
    "CAN": 38_781_291,
    "CHI": 19_629_590,
    "CHN": 1_425_671_352,
    "CIV": 28_873_034,
    "CMR": 28_647_293,
    "COL": 52_085_168,
    "CPV": 598_682,
    "CRO": 4_008_617,
    "CUB": 11_194_449,
    "CYP": 1_260_138,
    "CZE": 10_495_295,
    "DEN": 5_910_913,
    "DMA": 73_040,
    "DOM": 11_332_972,
    "ECU": 18_190_484,
    "EGY": 112_716_598,
    "ESP": 47_519_628,
    "EST": 1_322_765,
    "ETH": 126_527_060,
    "FIJ": 936_375,
    "FIN": 5_545_475,
    "FRA": 64_756_584,
    "GBR": 67_736_802,
    "GEO": 3_728_282,
    "GER": 83_294_633,
    "GRE": 10_341_277,
    "GRN": 126_183,
    "GUA": 18_092_026,
    "HKG": 7_491_609,
    "HUN": 10_156_239,
    "INA": 277_534_122,
    "IND": 1_428_627_663,
    "IRI": 89_172_767,
    "IRL": 5_056_935,
    "ISR": 9_174_520,
    "ITA": 58_870_762,
    "JAM": 2_825_544,
    "JOR": 11_337_052,
    "JPN": 123_294_513,
    "KAZ": 19_606_633,
    "KEN": 55_100_586,
    "KGZ": 6_735_347,
    "KOR": 51_784_059,
    "KOS": 1_663_595,
    "LCA": 180_251,
    "LTU": 2_718_352,
    "MAR": 37_840_044,
    "MAS": 34_308_525,
    "MDA": 3_435_931,
    "MEX": 128_455_567,
    "MGL": 3_447_157,
    "NED": 17_618_299,
    "NOR": 5_474_360,
    "NZL": 5_228_100,
    "PAK": 240_485_658,
    "PAN": 4_468_087,
    "PER": 34_352_719,
    "PHI": 117_337_368,
    "POL": 41_026_067,
    "POR": 10_247_605,
    "PRK": 26_160_821,
    "PUR": 3_260_314,
    "QAT": 2_716_391,
    "ROU": 19_892_812,
    "RSA": 60_414_495,
    "SGP": 6_014_723,
    "SLO": 2_119_675,
    "SRB": 7_149_077,
    "SUI": 8_796_669,
    "SVK": 5_795_199,
    "SWE": 10_612_086,
    "TJK": 10_143_543,
    "THA": 71_801_279,
    "TPE": 23_923_276,
    "TUN": 12_458_223,
    "TUR": 85_816_199,
    "UGA": 48_582_334,
    "UKR": 36_744_634,
    "USA": 339_996_563,
    "UZB": 35_163_944,
    "ZAM": 20_569_737,
}

POPULATION: Mapping[str, int] = MappingProxyType(_POPULATION)


def lookup_population(code: str, table: Mapping[str, int] = POPULATION) -> Optional[int]:
    """Return the population for ``code`` or ``None`` when it is not listed."""

    return table.get(code.upper())

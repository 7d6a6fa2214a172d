"""Birth sequence resolution.

For births before 2013 the three sequence digits identify the maternity
hospital (or region) that issued the code together with the local birth
order at that hospital. From 2013 onwards sequences are issued centrally and
are a flat ordinal.
"""

from bisect import bisect_right
from typing import NamedTuple

from isikukood_util.models.identification import HospitalInfo
from isikukood_util.utils.exceptions import InvalidSequenceNumberError

# First birth year with centrally issued sequence numbers
CENTRAL_ISSUE_YEAR = 2013


class HospitalRange(NamedTuple):
    """Inclusive sequence range assigned to one hospital or region."""

    lower: int
    upper: int
    name: str
    offset: int


# Ordered by lower bound, non-overlapping. Sequence 20 is not assigned.
HOSPITAL_RANGES: tuple[HospitalRange, ...] = (
    HospitalRange(1, 10, "Kuressaare haigla", 0),
    HospitalRange(11, 19, "Tartu Ülikooli Naistekliinik", 10),
    HospitalRange(21, 150, "Ida-Tallinna keskhaigla, Pelgulinna sünnitusmaja (Tallinn)", 20),
    HospitalRange(151, 160, "Keila haigla", 150),
    HospitalRange(161, 220, "Rapla haigla, Loksa haigla, Hiiumaa haigla (Kärdla)", 160),
    HospitalRange(221, 270, "Ida-Viru keskhaigla (Kohtla-Järve, endine Jõhvi)", 220),
    HospitalRange(271, 370, "Maarjamõisa kliinikum (Tartu), Jõgeva haigla", 270),
    HospitalRange(371, 420, "Narva haigla", 370),
    HospitalRange(421, 470, "Pärnu haigla", 420),
    HospitalRange(471, 490, "Haapsalu haigla", 470),
    HospitalRange(491, 520, "Järvamaa haigla (Paide)", 490),
    HospitalRange(521, 570, "Rakvere haigla, Tapa haigla", 520),
    HospitalRange(571, 600, "Valga haigla", 570),
    HospitalRange(601, 650, "Viljandi haigla", 600),
    HospitalRange(651, 700, "Lõuna-Eesti haigla (Võru), Põlva haigla", 650),
)

_LOWER_BOUNDS: tuple[int, ...] = tuple(r.lower for r in HOSPITAL_RANGES)


def determine_hospital(sequence: int) -> HospitalInfo:
    """Map a pre-2013 sequence number to its hospital and local birth order.

    Args:
        sequence: Three-digit sequence field as an integer

    Returns:
        HospitalInfo with hospital name and birth order

    Raises:
        InvalidSequenceNumberError: If no hospital range covers the sequence

    Example:
        >>> determine_hospital(29)
        HospitalInfo(birth_order='9', name='Ida-Tallinna keskhaigla, Pelgulinna sünnitusmaja (Tallinn)')
    """
    index = bisect_right(_LOWER_BOUNDS, sequence) - 1
    if index < 0 or sequence > HOSPITAL_RANGES[index].upper:
        raise InvalidSequenceNumberError(sequence)

    hospital = HOSPITAL_RANGES[index]
    return HospitalInfo(birth_order=str(sequence - hospital.offset), name=hospital.name)


def determine_hospital_or_birth_sequence(sequence: int, birth_year: int) -> HospitalInfo:
    """Resolve the sequence field according to the birth year.

    Births before 2013 resolve through the hospital table. Later births
    return the sequence verbatim as a flat ordinal without a hospital name.
    """
    if birth_year < CENTRAL_ISSUE_YEAR:
        return determine_hospital(sequence)
    return HospitalInfo(birth_order=str(sequence))

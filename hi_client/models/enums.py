"""Enumeration types for the consumer search schema.

Values are the codes the HI service expects on the wire.
"""

from enum import Enum


class SexType(str, Enum):
    MALE = "M"
    FEMALE = "F"
    INTERSEX = "I"
    NOT_STATED = "N"


class StateType(str, Enum):
    ACT = "ACT"
    NSW = "NSW"
    NT = "NT"
    QLD = "QLD"
    SA = "SA"
    TAS = "TAS"
    VIC = "VIC"
    WA = "WA"


class PostalDeliveryType(str, Enum):
    CARE_PO = "CARE PO"
    CMA = "CMA"
    CMB = "CMB"
    CPA = "CPA"
    GPO_BOX = "GPO BOX"
    LOCKED_BAG = "LOCKED BAG"
    MAIL_SERVICE = "MS"
    PO_BOX = "PO BOX"
    PRIVATE_BAG = "PRIVATE BAG"
    RMB = "RMB"
    RMS = "RMS"
    RSD = "RSD"


class UnitType(str, Enum):
    APARTMENT = "APT"
    FLAT = "F"
    SHOP = "SHOP"
    SUITE = "SE"
    TOWNHOUSE = "TNHS"
    UNIT = "U"
    VILLA = "VLLA"


class LevelType(str, Enum):
    BASEMENT = "B"
    FLOOR = "FL"
    GROUND = "G"
    LEVEL = "L"
    LOWER_GROUND = "LG"
    MEZZANINE = "M"
    UPPER_GROUND = "UG"


class StreetType(str, Enum):
    AVENUE = "AV"
    BOULEVARD = "BVD"
    CIRCUIT = "CCT"
    CLOSE = "CL"
    COURT = "CT"
    CRESCENT = "CR"
    DRIVE = "DR"
    HIGHWAY = "HWY"
    LANE = "LANE"
    PARADE = "PDE"
    PLACE = "PL"
    ROAD = "RD"
    STREET = "ST"
    TERRACE = "TCE"
    WAY = "WAY"


class StreetSuffixType(str, Enum):
    CENTRAL = "CN"
    EAST = "E"
    EXTENSION = "EX"
    LOWER = "LR"
    NORTH = "N"
    NORTH_EAST = "NE"
    NORTH_WEST = "NW"
    SOUTH = "S"
    SOUTH_EAST = "SE"
    SOUTH_WEST = "SW"
    UPPER = "UP"
    WEST = "W"


class SearchKind(str, Enum):
    """Consumer IHI search variants, each with its own field rule."""

    BASIC = "basic"
    BASIC_MEDICARE = "basic_medicare"
    BASIC_DVA = "basic_dva"
    DETAILED = "detailed"
    AUSTRALIAN_POSTAL_ADDRESS = "australian_postal_address"
    AUSTRALIAN_STREET_ADDRESS = "australian_street_address"
    INTERNATIONAL_ADDRESS = "international_address"

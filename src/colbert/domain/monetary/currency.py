from __future__ import annotations

from enum import Enum

# Upper bound on minor-unit digits accepted for a currency
MAX_DECIMAL_PLACES = 18


class CurrencyCode(Enum):
    """ISO 4217 alphabetic currency codes."""

    AED = "AED"
    AFN = "AFN"
    ALL = "ALL"
    AMD = "AMD"
    ANG = "ANG"
    AOA = "AOA"
    ARS = "ARS"
    AUD = "AUD"
    AWG = "AWG"
    AZN = "AZN"
    BAM = "BAM"
    BBD = "BBD"
    BDT = "BDT"
    BGN = "BGN"
    BHD = "BHD"
    BIF = "BIF"
    BMD = "BMD"
    BND = "BND"
    BOB = "BOB"
    BOV = "BOV"
    BRL = "BRL"
    BSD = "BSD"
    BTN = "BTN"
    BWP = "BWP"
    BYN = "BYN"
    BZD = "BZD"
    CAD = "CAD"
    CDF = "CDF"
    CHE = "CHE"
    CHF = "CHF"
    CHW = "CHW"
    CLF = "CLF"
    CLP = "CLP"
    CNY = "CNY"
    COP = "COP"
    COU = "COU"
    CRC = "CRC"
    CUC = "CUC"
    CUP = "CUP"
    CVE = "CVE"
    CZK = "CZK"
    DJF = "DJF"
    DKK = "DKK"
    DOP = "DOP"
    DZD = "DZD"
    EGP = "EGP"
    ERN = "ERN"
    ETB = "ETB"
    EUR = "EUR"
    FJD = "FJD"
    FKP = "FKP"
    GBP = "GBP"
    GEL = "GEL"
    GHS = "GHS"
    GIP = "GIP"
    GMD = "GMD"
    GNF = "GNF"
    GTQ = "GTQ"
    GYD = "GYD"
    HKD = "HKD"
    HNL = "HNL"
    HTG = "HTG"
    HUF = "HUF"
    IDR = "IDR"
    ILS = "ILS"
    INR = "INR"
    IQD = "IQD"
    IRR = "IRR"
    ISK = "ISK"
    JMD = "JMD"
    JOD = "JOD"
    JPY = "JPY"
    KES = "KES"
    KGS = "KGS"
    KHR = "KHR"
    KMF = "KMF"
    KPW = "KPW"
    KRW = "KRW"
    KWD = "KWD"
    KYD = "KYD"
    KZT = "KZT"
    LAK = "LAK"
    LBP = "LBP"
    LKR = "LKR"
    LRD = "LRD"
    LSL = "LSL"
    LYD = "LYD"
    MAD = "MAD"
    MDL = "MDL"
    MGA = "MGA"
    MKD = "MKD"
    MMK = "MMK"
    MNT = "MNT"
    MOP = "MOP"
    MRU = "MRU"
    MUR = "MUR"
    MVR = "MVR"
    MWK = "MWK"
    MXN = "MXN"
    MXV = "MXV"
    MYR = "MYR"
    MZN = "MZN"
    NAD = "NAD"
    NGN = "NGN"
    NIO = "NIO"
    NOK = "NOK"
    NPR = "NPR"
    NZD = "NZD"
    OMR = "OMR"
    PAB = "PAB"
    PEN = "PEN"
    PGK = "PGK"
    PHP = "PHP"
    PKR = "PKR"
    PLN = "PLN"
    PYG = "PYG"
    QAR = "QAR"
    RON = "RON"
    RSD = "RSD"
    RUB = "RUB"
    RWF = "RWF"
    SAR = "SAR"
    SBD = "SBD"
    SCR = "SCR"
    SDG = "SDG"
    SEK = "SEK"
    SGD = "SGD"
    SHP = "SHP"
    SLE = "SLE"
    SLL = "SLL"
    SOS = "SOS"
    SRD = "SRD"
    SSP = "SSP"
    STN = "STN"
    SVC = "SVC"
    SYP = "SYP"
    SZL = "SZL"
    THB = "THB"
    TJS = "TJS"
    TMT = "TMT"
    TND = "TND"
    TOP = "TOP"
    TRY = "TRY"
    TTD = "TTD"
    TWD = "TWD"
    TZS = "TZS"
    UAH = "UAH"
    UGX = "UGX"
    USD = "USD"
    USN = "USN"
    UYI = "UYI"
    UYU = "UYU"
    UYW = "UYW"
    UZS = "UZS"
    VED = "VED"
    VES = "VES"
    VND = "VND"
    VUV = "VUV"
    WST = "WST"
    XAF = "XAF"
    XAG = "XAG"
    XAU = "XAU"
    XBA = "XBA"
    XBB = "XBB"
    XBC = "XBC"
    XBD = "XBD"
    XCD = "XCD"
    XDR = "XDR"
    XOF = "XOF"
    XPD = "XPD"
    XPF = "XPF"
    XPT = "XPT"
    XSU = "XSU"
    XTS = "XTS"
    XUA = "XUA"
    XXX = "XXX"
    YER = "YER"
    ZAR = "ZAR"
    ZMW = "ZMW"
    ZWL = "ZWL"


class Currency:
    """Represents a currency with ISO 4217 code, precision, and display metadata.

    Instances are immutable. Two currencies are equal when their codes are
    equal; only equal currencies are compatible in Money arithmetic.

    Attributes:
        code (CurrencyCode): ISO 4217 code (e.g. CurrencyCode.USD).
        decimal_places (int): Number of minor-unit digits (0-18).
        name (str): Full currency name.
        symbol (str): Display symbol (e.g. "$").
    """

    def __init__(self, code: CurrencyCode | str, decimal_places: int, name: str, symbol: str):
        """Initialize a Currency instance.

        Args:
            code: ISO 4217 code as CurrencyCode or its string form (e.g. "USD").
            decimal_places: Number of minor-unit digits (0-18).
            name: Full currency name.
            symbol: Display symbol.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If $code is neither CurrencyCode nor str.
        """
        if isinstance(code, str):
            normalized = code.upper().strip()
            # Raise: string code must name a known ISO 4217 currency
            if normalized not in CurrencyCode.__members__:
                raise ValueError(f"$code must be an ISO 4217 currency code, but provided value is: '{code}'")
            code = CurrencyCode[normalized]

        if not isinstance(code, CurrencyCode):
            raise TypeError(f"$code must be a CurrencyCode or str, but provided value is: {code!r}")

        if isinstance(decimal_places, bool) or not isinstance(decimal_places, int) or not 0 <= decimal_places <= MAX_DECIMAL_PLACES:
            raise ValueError(f"$decimal_places must be an integer between 0 and {MAX_DECIMAL_PLACES}, but provided value is: {decimal_places!r}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(symbol, str) or not symbol.strip():
            raise ValueError(f"$symbol must be a non-empty string, but provided value is: '{symbol}'")

        self._code = code
        self._decimal_places = decimal_places
        self._name = name.strip()
        self._symbol = symbol.strip()

    @property
    def code(self) -> CurrencyCode:
        """Get the currency code."""
        return self._code

    @property
    def decimal_places(self) -> int:
        """Get the number of minor-unit digits."""
        return self._decimal_places

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def symbol(self) -> str:
        """Get the currency symbol."""
        return self._symbol

    @property
    def minor_units_per_major(self) -> int:
        """Number of minor units in one major unit (100 for USD, 1 for JPY)."""
        return 10**self._decimal_places

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code.value

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code.value}', {self.decimal_places}, '{self.name}', '{self.symbol}')"

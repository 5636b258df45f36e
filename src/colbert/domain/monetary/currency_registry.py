"""ISO 4217 currency table.

Every currency is a module-level constant (e.g. `USD`, `JPY`) and is also
reachable through the read-only `CURRENCIES` mapping keyed by CurrencyCode.
The table is built once at import and never changes.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from colbert.domain.monetary.currency import Currency, CurrencyCode

logger = logging.getLogger(__name__)


AED = Currency(CurrencyCode.AED, 2, "United Arab Emirates dirham", "د.إ")
AFN = Currency(CurrencyCode.AFN, 2, "Afghan afghani", "؋")
ALL = Currency(CurrencyCode.ALL, 2, "Albanian lek", "L")
AMD = Currency(CurrencyCode.AMD, 2, "Armenian dram", "֏")
ANG = Currency(CurrencyCode.ANG, 2, "Netherlands Antillean guilder", "ƒ")
AOA = Currency(CurrencyCode.AOA, 2, "Angolan kwanza", "Kz")
ARS = Currency(CurrencyCode.ARS, 2, "Argentine peso", "$")
AUD = Currency(CurrencyCode.AUD, 2, "Australian dollar", "$")
AWG = Currency(CurrencyCode.AWG, 2, "Aruban florin", "ƒ")
AZN = Currency(CurrencyCode.AZN, 2, "Azerbaijani manat", "₼")
BAM = Currency(CurrencyCode.BAM, 2, "Bosnia and Herzegovina convertible mark", "KM")
BBD = Currency(CurrencyCode.BBD, 2, "Barbados dollar", "$")
BDT = Currency(CurrencyCode.BDT, 2, "Bangladeshi taka", "৳")
BGN = Currency(CurrencyCode.BGN, 2, "Bulgarian lev", "лв")
BHD = Currency(CurrencyCode.BHD, 3, "Bahraini dinar", ".د.ب")
BIF = Currency(CurrencyCode.BIF, 2, "Burundian franc", "FBu")
BMD = Currency(CurrencyCode.BMD, 2, "Bermudian dollar", "$")
BND = Currency(CurrencyCode.BND, 2, "Brunei dollar", "$")
BOB = Currency(CurrencyCode.BOB, 2, "Boliviano", "Bs.")
BOV = Currency(CurrencyCode.BOV, 2, "Bolivian Mvdol (funds code)", "BOV")
BRL = Currency(CurrencyCode.BRL, 2, "Brazilian real", "R$")
BSD = Currency(CurrencyCode.BSD, 2, "Bahamian dollar", "$")
BTN = Currency(CurrencyCode.BTN, 2, "Bhutanese ngultrum", "Nu.")
BWP = Currency(CurrencyCode.BWP, 2, "Botswana pula", "P")
BYN = Currency(CurrencyCode.BYN, 2, "Belarusian ruble", "Br")
BZD = Currency(CurrencyCode.BZD, 2, "Belize dollar", "$")
CAD = Currency(CurrencyCode.CAD, 2, "Canadian dollar", "$")
CDF = Currency(CurrencyCode.CDF, 2, "Congolese franc", "FC")
CHE = Currency(CurrencyCode.CHE, 2, "WIR euro (complementary currency)", "CHE")
CHF = Currency(CurrencyCode.CHF, 2, "Swiss franc", "CHF")
CHW = Currency(CurrencyCode.CHW, 2, "WIR franc (complementary currency)", "CHW")
CLF = Currency(CurrencyCode.CLF, 4, "Unidad de Fomento (funds code)", "CLF")
CLP = Currency(CurrencyCode.CLP, 0, "Chilean peso", "$")
CNY = Currency(CurrencyCode.CNY, 2, "Renminbi", "¥")
COP = Currency(CurrencyCode.COP, 2, "Colombian peso", "$")
COU = Currency(CurrencyCode.COU, 2, "Unidad de Valor Real (UVR) (funds code)", "COU")
CRC = Currency(CurrencyCode.CRC, 2, "Costa Rican colon", "₡")
CUC = Currency(CurrencyCode.CUC, 2, "Cuban convertible peso", "$")
CUP = Currency(CurrencyCode.CUP, 2, "Cuban peso", "$")
CVE = Currency(CurrencyCode.CVE, 2, "Cape Verdean escudo", "$")
CZK = Currency(CurrencyCode.CZK, 2, "Czech koruna", "Kč")
DJF = Currency(CurrencyCode.DJF, 0, "Djiboutian franc", "Fdj")
DKK = Currency(CurrencyCode.DKK, 2, "Danish krone", "kr")
DOP = Currency(CurrencyCode.DOP, 2, "Dominican peso", "$")
DZD = Currency(CurrencyCode.DZD, 2, "Algerian dinar", "د.ج")
EGP = Currency(CurrencyCode.EGP, 2, "Egyptian pound", "£")
ERN = Currency(CurrencyCode.ERN, 2, "Eritrean nakfa", "Nfk")
ETB = Currency(CurrencyCode.ETB, 2, "Ethiopian birr", "Br")
EUR = Currency(CurrencyCode.EUR, 2, "Euro", "€")
FJD = Currency(CurrencyCode.FJD, 2, "Fiji dollar", "$")
FKP = Currency(CurrencyCode.FKP, 2, "Falkland Islands pound", "£")
GBP = Currency(CurrencyCode.GBP, 2, "Pound sterling", "£")
GEL = Currency(CurrencyCode.GEL, 2, "Georgian lari", "₾")
GHS = Currency(CurrencyCode.GHS, 2, "Ghanaian cedi", "₵")
GIP = Currency(CurrencyCode.GIP, 2, "Gibraltar pound", "£")
GMD = Currency(CurrencyCode.GMD, 2, "Gambian dalasi", "D")
GNF = Currency(CurrencyCode.GNF, 0, "Guinean franc", "FG")
GTQ = Currency(CurrencyCode.GTQ, 2, "Guatemalan quetzal", "Q")
GYD = Currency(CurrencyCode.GYD, 2, "Guyanese dollar", "$")
HKD = Currency(CurrencyCode.HKD, 2, "Hong Kong dollar", "$")
HNL = Currency(CurrencyCode.HNL, 2, "Honduran lempira", "L")
HTG = Currency(CurrencyCode.HTG, 2, "Haitian gourde", "G")
HUF = Currency(CurrencyCode.HUF, 2, "Hungarian forint", "Ft")
IDR = Currency(CurrencyCode.IDR, 2, "Indonesian rupiah", "Rp")
ILS = Currency(CurrencyCode.ILS, 2, "Israeli new shekel", "₪")
INR = Currency(CurrencyCode.INR, 2, "Indian rupee", "₹")
IQD = Currency(CurrencyCode.IQD, 3, "Iraqi dinar", "ع.د")
IRR = Currency(CurrencyCode.IRR, 2, "Iranian rial", "﷼")
ISK = Currency(CurrencyCode.ISK, 0, "Icelandic króna (plural: krónur)", "kr")
JMD = Currency(CurrencyCode.JMD, 2, "Jamaican dollar", "$")
JOD = Currency(CurrencyCode.JOD, 3, "Jordanian dinar", "د.ا")
JPY = Currency(CurrencyCode.JPY, 0, "Japanese yen", "¥")
KES = Currency(CurrencyCode.KES, 2, "Kenyan shilling", "Sh")
KGS = Currency(CurrencyCode.KGS, 2, "Kyrgyzstani som", "с")
KHR = Currency(CurrencyCode.KHR, 2, "Cambodian riel", "៛")
KMF = Currency(CurrencyCode.KMF, 0, "Comoro franc", "CF")
KPW = Currency(CurrencyCode.KPW, 2, "North Korean won", "₩")
KRW = Currency(CurrencyCode.KRW, 2, "South Korean won", "₩")
KWD = Currency(CurrencyCode.KWD, 2, "Kuwaiti dinar", "د.ك")
KYD = Currency(CurrencyCode.KYD, 2, "Cayman Islands dollar", "$")
KZT = Currency(CurrencyCode.KZT, 2, "Kazakhstani tenge", "₸")
LAK = Currency(CurrencyCode.LAK, 0, "Lao kip", "₭")
LBP = Currency(CurrencyCode.LBP, 2, "Lebanese pound", "ل.ل")
LKR = Currency(CurrencyCode.LKR, 2, "Sri Lankan rupee", "Rs")
LRD = Currency(CurrencyCode.LRD, 2, "Liberian dollar", "$")
LSL = Currency(CurrencyCode.LSL, 2, "Lesotho loti", "L")
LYD = Currency(CurrencyCode.LYD, 3, "Libyan dinar", "ل.د")
MAD = Currency(CurrencyCode.MAD, 2, "Moroccan dirham", "د.م.")
MDL = Currency(CurrencyCode.MDL, 2, "Moldovan leu", "L")
MGA = Currency(CurrencyCode.MGA, 2, "Malagasy ariary", "Ar")
MKD = Currency(CurrencyCode.MKD, 2, "Macedonian denar", "ден")
MMK = Currency(CurrencyCode.MMK, 2, "Myanmar kyat", "K")
MNT = Currency(CurrencyCode.MNT, 2, "Mongolian tögrög", "₮")
MOP = Currency(CurrencyCode.MOP, 2, "Macanese pataca", "P")
MRU = Currency(CurrencyCode.MRU, 2, "Mauritanian ouguiya", "UM")
MUR = Currency(CurrencyCode.MUR, 2, "Mauritian rupee", "₨")
MVR = Currency(CurrencyCode.MVR, 2, "Maldivian rufiyaa", "Rf")
MWK = Currency(CurrencyCode.MWK, 2, "Malawian kwacha", "MK")
MXN = Currency(CurrencyCode.MXN, 2, "Mexican peso", "$")
MXV = Currency(CurrencyCode.MXV, 2, "Mexican Unidad de Inversion (UDI) (funds code)", "MXV")
MYR = Currency(CurrencyCode.MYR, 2, "Malaysian ringgit", "RM")
MZN = Currency(CurrencyCode.MZN, 2, "Mozambican metical", "MT")
NAD = Currency(CurrencyCode.NAD, 2, "Namibian dollar", "$")
NGN = Currency(CurrencyCode.NGN, 2, "Nigerian naira", "₦")
NIO = Currency(CurrencyCode.NIO, 2, "Nicaraguan córdoba", "C$")
NOK = Currency(CurrencyCode.NOK, 2, "Norwegian krone", "kr")
NPR = Currency(CurrencyCode.NPR, 2, "Nepalese rupee", "₨")
NZD = Currency(CurrencyCode.NZD, 2, "New Zealand dollar", "$")
OMR = Currency(CurrencyCode.OMR, 3, "Omani rial", "ر.ع.")
PAB = Currency(CurrencyCode.PAB, 2, "Panamanian balboa", "B/.")
PEN = Currency(CurrencyCode.PEN, 2, "Peruvian sol", "S/.")
PGK = Currency(CurrencyCode.PGK, 2, "Papua New Guinean kina", "K")
PHP = Currency(CurrencyCode.PHP, 2, "Philippine peso", "₱")
PKR = Currency(CurrencyCode.PKR, 2, "Pakistani rupee", "₨")
PLN = Currency(CurrencyCode.PLN, 2, "Polish złoty", "zł")
PYG = Currency(CurrencyCode.PYG, 0, "Paraguayan guaraní", "₲")
QAR = Currency(CurrencyCode.QAR, 2, "Qatari riyal", "ر.ق")
RON = Currency(CurrencyCode.RON, 2, "Romanian leu", "lei")
RSD = Currency(CurrencyCode.RSD, 2, "Serbian dinar", "дин.")
RUB = Currency(CurrencyCode.RUB, 2, "Russian ruble", "₽")
RWF = Currency(CurrencyCode.RWF, 0, "Rwandan franc", "FRw")
SAR = Currency(CurrencyCode.SAR, 2, "Saudi riyal", "ر.س")
SBD = Currency(CurrencyCode.SBD, 2, "Solomon Islands dollar", "$")
SCR = Currency(CurrencyCode.SCR, 2, "Seychelles rupee", "₨")
SDG = Currency(CurrencyCode.SDG, 2, "Sudanese pound", "ج.س.")
SEK = Currency(CurrencyCode.SEK, 2, "Swedish krona (plural: kronor)", "kr")
SGD = Currency(CurrencyCode.SGD, 2, "Singapore dollar", "$")
SHP = Currency(CurrencyCode.SHP, 2, "Saint Helena pound", "£")
SLE = Currency(CurrencyCode.SLE, 2, "Sierra Leonean leone (new leone)", "Le")
SLL = Currency(CurrencyCode.SLL, 2, "Sierra Leonean leone (old leone)", "Le")
SOS = Currency(CurrencyCode.SOS, 2, "Somali shilling", "Sh")
SRD = Currency(CurrencyCode.SRD, 2, "Surinamese dollar", "$")
SSP = Currency(CurrencyCode.SSP, 2, "South Sudanese pound", "£")
STN = Currency(CurrencyCode.STN, 2, "São Tomé and Príncipe dobra", "Db")
SVC = Currency(CurrencyCode.SVC, 2, "Salvadoran colón", "₡")
SYP = Currency(CurrencyCode.SYP, 2, "Syrian pound", "£")
SZL = Currency(CurrencyCode.SZL, 2, "Swazi lilangeni", "E")
THB = Currency(CurrencyCode.THB, 2, "Thai baht", "฿")
TJS = Currency(CurrencyCode.TJS, 2, "Tajikistani somoni", "ЅМ")
TMT = Currency(CurrencyCode.TMT, 2, "Turkmenistan manat", "m")
TND = Currency(CurrencyCode.TND, 3, "Tunisian dinar", "د.ت")
TOP = Currency(CurrencyCode.TOP, 2, "Tongan paʻanga", "T$")
TRY = Currency(CurrencyCode.TRY, 2, "Turkish lira", "₺")
TTD = Currency(CurrencyCode.TTD, 2, "Trinidad and Tobago dollar", "$")
TWD = Currency(CurrencyCode.TWD, 2, "New Taiwan dollar", "NT$")
TZS = Currency(CurrencyCode.TZS, 2, "Tanzanian shilling", "Sh")
UAH = Currency(CurrencyCode.UAH, 2, "Ukrainian hryvnia", "₴")
UGX = Currency(CurrencyCode.UGX, 2, "Ugandan shilling", "Sh")
USD = Currency(CurrencyCode.USD, 2, "United States dollar", "$")
USN = Currency(CurrencyCode.USN, 2, "United States dollar (next day) (funds code)", "USN")
UYI = Currency(CurrencyCode.UYI, 3, "Uruguay Peso en Unidades Indexadas (URUIURUI) (funds code)", "UYI")
UYU = Currency(CurrencyCode.UYU, 2, "Uruguayan peso", "$")
UYW = Currency(CurrencyCode.UYW, 2, "Unidad previsional", "UYW")
UZS = Currency(CurrencyCode.UZS, 2, "Uzbekistan sum", "сўм")
VED = Currency(CurrencyCode.VED, 2, "Venezuelan digital bolívar", "Bs.")
VES = Currency(CurrencyCode.VES, 2, "Venezuelan sovereign bolívar", "Bs.")
VND = Currency(CurrencyCode.VND, 0, "Vietnamese đồng", "₫")
VUV = Currency(CurrencyCode.VUV, 0, "Vanuatu vatu", "VT")
WST = Currency(CurrencyCode.WST, 2, "Samoan tala", "WS$")
XAF = Currency(CurrencyCode.XAF, 2, "CFA franc BEAC", "FCFA")
XAG = Currency(CurrencyCode.XAG, 0, "Silver (one troy ounce)", "XAG")
XAU = Currency(CurrencyCode.XAU, 0, "Gold (one troy ounce)", "XAU")
XBA = Currency(CurrencyCode.XBA, 2, "European Composite Unit (EURCO) (bond market unit)", "XBA")
XBB = Currency(CurrencyCode.XBB, 2, "European Monetary Unit (E.M.U.-6) (bond market unit)", "XBB")
XBC = Currency(CurrencyCode.XBC, 2, "European Unit of Account 9 (E.U.A.-9) (bond market unit)", "XBC")
XBD = Currency(CurrencyCode.XBD, 2, "European Unit of Account 17 (E.U.A.-17) (bond market unit)", "XBD")
XCD = Currency(CurrencyCode.XCD, 2, "East Caribbean dollar", "$")
XDR = Currency(CurrencyCode.XDR, 2, "Special drawing rights", "XDR")
XOF = Currency(CurrencyCode.XOF, 2, "CFA franc BCEAO", "CFA")
XPD = Currency(CurrencyCode.XPD, 2, "Palladium (one troy ounce)", "XPD")
XPF = Currency(CurrencyCode.XPF, 2, "CFP franc (franc Pacifique)", "CFP")
XPT = Currency(CurrencyCode.XPT, 2, "Platinum (one troy ounce)", "XPT")
XSU = Currency(CurrencyCode.XSU, 2, "SUCRE", "XSU")
XTS = Currency(CurrencyCode.XTS, 2, "Code reserved for testing", "XTS")
XUA = Currency(CurrencyCode.XUA, 2, "ADB Unit of Account", "XUA")
XXX = Currency(CurrencyCode.XXX, 2, "No currency", "XXX")
YER = Currency(CurrencyCode.YER, 2, "Yemeni rial", "﷼")
ZAR = Currency(CurrencyCode.ZAR, 2, "South African rand", "R")
ZMW = Currency(CurrencyCode.ZMW, 2, "Zambian kwacha", "ZK")
ZWL = Currency(CurrencyCode.ZWL, 2, "Zimbabwean dollar (fifth)", "$")


CURRENCIES: Mapping[CurrencyCode, Currency] = MappingProxyType(
    {
        CurrencyCode.AED: AED,
        CurrencyCode.AFN: AFN,
        CurrencyCode.ALL: ALL,
        CurrencyCode.AMD: AMD,
        CurrencyCode.ANG: ANG,
        CurrencyCode.AOA: AOA,
        CurrencyCode.ARS: ARS,
        CurrencyCode.AUD: AUD,
        CurrencyCode.AWG: AWG,
        CurrencyCode.AZN: AZN,
        CurrencyCode.BAM: BAM,
        CurrencyCode.BBD: BBD,
        CurrencyCode.BDT: BDT,
        CurrencyCode.BGN: BGN,
        CurrencyCode.BHD: BHD,
        CurrencyCode.BIF: BIF,
        CurrencyCode.BMD: BMD,
        CurrencyCode.BND: BND,
        CurrencyCode.BOB: BOB,
        CurrencyCode.BOV: BOV,
        CurrencyCode.BRL: BRL,
        CurrencyCode.BSD: BSD,
        CurrencyCode.BTN: BTN,
        CurrencyCode.BWP: BWP,
        CurrencyCode.BYN: BYN,
        CurrencyCode.BZD: BZD,
        CurrencyCode.CAD: CAD,
        CurrencyCode.CDF: CDF,
        CurrencyCode.CHE: CHE,
        CurrencyCode.CHF: CHF,
        CurrencyCode.CHW: CHW,
        CurrencyCode.CLF: CLF,
        CurrencyCode.CLP: CLP,
        CurrencyCode.CNY: CNY,
        CurrencyCode.COP: COP,
        CurrencyCode.COU: COU,
        CurrencyCode.CRC: CRC,
        CurrencyCode.CUC: CUC,
        CurrencyCode.CUP: CUP,
        CurrencyCode.CVE: CVE,
        CurrencyCode.CZK: CZK,
        CurrencyCode.DJF: DJF,
        CurrencyCode.DKK: DKK,
        CurrencyCode.DOP: DOP,
        CurrencyCode.DZD: DZD,
        CurrencyCode.EGP: EGP,
        CurrencyCode.ERN: ERN,
        CurrencyCode.ETB: ETB,
        CurrencyCode.EUR: EUR,
        CurrencyCode.FJD: FJD,
        CurrencyCode.FKP: FKP,
        CurrencyCode.GBP: GBP,
        CurrencyCode.GEL: GEL,
        CurrencyCode.GHS: GHS,
        CurrencyCode.GIP: GIP,
        CurrencyCode.GMD: GMD,
        CurrencyCode.GNF: GNF,
        CurrencyCode.GTQ: GTQ,
        CurrencyCode.GYD: GYD,
        CurrencyCode.HKD: HKD,
        CurrencyCode.HNL: HNL,
        CurrencyCode.HTG: HTG,
        CurrencyCode.HUF: HUF,
        CurrencyCode.IDR: IDR,
        CurrencyCode.ILS: ILS,
        CurrencyCode.INR: INR,
        CurrencyCode.IQD: IQD,
        CurrencyCode.IRR: IRR,
        CurrencyCode.ISK: ISK,
        CurrencyCode.JMD: JMD,
        CurrencyCode.JOD: JOD,
        CurrencyCode.JPY: JPY,
        CurrencyCode.KES: KES,
        CurrencyCode.KGS: KGS,
        CurrencyCode.KHR: KHR,
        CurrencyCode.KMF: KMF,
        CurrencyCode.KPW: KPW,
        CurrencyCode.KRW: KRW,
        CurrencyCode.KWD: KWD,
        CurrencyCode.KYD: KYD,
        CurrencyCode.KZT: KZT,
        CurrencyCode.LAK: LAK,
        CurrencyCode.LBP: LBP,
        CurrencyCode.LKR: LKR,
        CurrencyCode.LRD: LRD,
        CurrencyCode.LSL: LSL,
        CurrencyCode.LYD: LYD,
        CurrencyCode.MAD: MAD,
        CurrencyCode.MDL: MDL,
        CurrencyCode.MGA: MGA,
        CurrencyCode.MKD: MKD,
        CurrencyCode.MMK: MMK,
        CurrencyCode.MNT: MNT,
        CurrencyCode.MOP: MOP,
        CurrencyCode.MRU: MRU,
        CurrencyCode.MUR: MUR,
        CurrencyCode.MVR: MVR,
        CurrencyCode.MWK: MWK,
        CurrencyCode.MXN: MXN,
        CurrencyCode.MXV: MXV,
        CurrencyCode.MYR: MYR,
        CurrencyCode.MZN: MZN,
        CurrencyCode.NAD: NAD,
        CurrencyCode.NGN: NGN,
        CurrencyCode.NIO: NIO,
        CurrencyCode.NOK: NOK,
        CurrencyCode.NPR: NPR,
        CurrencyCode.NZD: NZD,
        CurrencyCode.OMR: OMR,
        CurrencyCode.PAB: PAB,
        CurrencyCode.PEN: PEN,
        CurrencyCode.PGK: PGK,
        CurrencyCode.PHP: PHP,
        CurrencyCode.PKR: PKR,
        CurrencyCode.PLN: PLN,
        CurrencyCode.PYG: PYG,
        CurrencyCode.QAR: QAR,
        CurrencyCode.RON: RON,
        CurrencyCode.RSD: RSD,
        CurrencyCode.RUB: RUB,
        CurrencyCode.RWF: RWF,
        CurrencyCode.SAR: SAR,
        CurrencyCode.SBD: SBD,
        CurrencyCode.SCR: SCR,
        CurrencyCode.SDG: SDG,
        CurrencyCode.SEK: SEK,
        CurrencyCode.SGD: SGD,
        CurrencyCode.SHP: SHP,
        CurrencyCode.SLE: SLE,
        CurrencyCode.SLL: SLL,
        CurrencyCode.SOS: SOS,
        CurrencyCode.SRD: SRD,
        CurrencyCode.SSP: SSP,
        CurrencyCode.STN: STN,
        CurrencyCode.SVC: SVC,
        CurrencyCode.SYP: SYP,
        CurrencyCode.SZL: SZL,
        CurrencyCode.THB: THB,
        CurrencyCode.TJS: TJS,
        CurrencyCode.TMT: TMT,
        CurrencyCode.TND: TND,
        CurrencyCode.TOP: TOP,
        CurrencyCode.TRY: TRY,
        CurrencyCode.TTD: TTD,
        CurrencyCode.TWD: TWD,
        CurrencyCode.TZS: TZS,
        CurrencyCode.UAH: UAH,
        CurrencyCode.UGX: UGX,
        CurrencyCode.USD: USD,
        CurrencyCode.USN: USN,
        CurrencyCode.UYI: UYI,
        CurrencyCode.UYU: UYU,
        CurrencyCode.UYW: UYW,
        CurrencyCode.UZS: UZS,
        CurrencyCode.VED: VED,
        CurrencyCode.VES: VES,
        CurrencyCode.VND: VND,
        CurrencyCode.VUV: VUV,
        CurrencyCode.WST: WST,
        CurrencyCode.XAF: XAF,
        CurrencyCode.XAG: XAG,
        CurrencyCode.XAU: XAU,
        CurrencyCode.XBA: XBA,
        CurrencyCode.XBB: XBB,
        CurrencyCode.XBC: XBC,
        CurrencyCode.XBD: XBD,
        CurrencyCode.XCD: XCD,
        CurrencyCode.XDR: XDR,
        CurrencyCode.XOF: XOF,
        CurrencyCode.XPD: XPD,
        CurrencyCode.XPF: XPF,
        CurrencyCode.XPT: XPT,
        CurrencyCode.XSU: XSU,
        CurrencyCode.XTS: XTS,
        CurrencyCode.XUA: XUA,
        CurrencyCode.XXX: XXX,
        CurrencyCode.YER: YER,
        CurrencyCode.ZAR: ZAR,
        CurrencyCode.ZMW: ZMW,
        CurrencyCode.ZWL: ZWL,
    }
)

logger.debug(f"Loaded {len(CURRENCIES)} ISO 4217 currencies")


def get_currency(code: CurrencyCode | str) -> Currency:
    """Get currency from the ISO 4217 table by code.

    Args:
        code: CurrencyCode member or its string form (case-insensitive).

    Returns:
        Currency: The currency instance.

    Raises:
        ValueError: If currency code is not found in the table.
        TypeError: If $code is neither CurrencyCode nor str.
    """
    if isinstance(code, str):
        normalized = code.upper().strip()
        if normalized not in CurrencyCode.__members__:
            raise ValueError(f"Currency with code '{normalized}' not found in ISO 4217 table")
        code = CurrencyCode[normalized]

    if not isinstance(code, CurrencyCode):
        raise TypeError(f"$code must be a CurrencyCode or str, but provided value is: {code!r}")

    return CURRENCIES[code]

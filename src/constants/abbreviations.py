from types import MappingProxyType

# Receipt shorthand seen on supplier invoices, keyed in upper case.
_RECEIPT_ABBREVIATIONS = {
    # proteins
    "CHKN": "chicken",
    "BF": "beef",
    "GRD": "ground",
    "GRND": "ground",
    "BRST": "breast",
    "THGH": "thigh",
    "WNG": "wing",
    "WNGS": "wings",
    "SALMN": "salmon",
    "SHRMP": "shrimp",
    "PRK": "pork",
    "SAUS": "sausage",
    "BCN": "bacon",
    "BNLS": "boneless",
    "SKNLS": "skinless",
    # dairy
    "MLK": "milk",
    "BTTR": "butter",
    "CHSE": "cheese",
    "CHS": "cheese",
    "YOG": "yogurt",
    "YGRT": "yogurt",
    "CRM": "cream",
    # produce
    "ORG": "organic",
    "ORGNC": "organic",
    "VEG": "vegetable",
    "FRT": "fruit",
    "LG": "large",
    "SM": "small",
    "MED": "medium",
    "GRN": "green",
    "YEL": "yellow",
    "WHT": "wheat",
    "BRN": "brown",
    "PTTO": "potato",
    "TOMS": "tomatoes",
    "TOM": "tomato",
    "LET": "lettuce",
    "LETC": "lettuce",
    "CUC": "cucumber",
    "ONIN": "onion",
    "ONJN": "onion",
    "GRLC": "garlic",
    "PEPS": "peppers",
    "PEP": "pepper",
    "MUSHRM": "mushroom",
    "MUSH": "mushroom",
    "BRCLI": "broccoli",
    "BROC": "broccoli",
    "CRRT": "carrot",
    "CARR": "carrot",
    "APPL": "apple",
    "BAN": "banana",
    "STRW": "strawberry",
    "STRWB": "strawberry",
    "BLUB": "blueberry",
    "RASP": "raspberry",
    # bakery and dry goods
    "BRD": "bread",
    "WHL": "whole",
    "FLR": "flour",
    "FLOR": "flour",
    "SGR": "sugar",
    "SUGR": "sugar",
    "RST": "roast",
    # pantry and misc
    "OL": "oil",
    "OLVE": "olive",
    "EVOO": "extra virgin olive oil",
    "SLT": "salt",
    "SPR": "sparkling",
    "WTR": "water",
    "JCE": "juice",
    "FF": "fat free",
    "RF": "reduced fat",
    "LF": "low fat",
    "NS": "no salt",
    "SWT": "sweet",
    "FRZ": "frozen",
    "FRZN": "frozen",
    "FRH": "fresh",
    "PPR": "paper",
    "PPRTWL": "paper towel",
    "PAPR": "paper",
    "PRCHMNT": "parchment",
    # packaging and units
    "PKG": "package",
    "PK": "pack",
    "CT": "count",
    "OZ": "ounce",
    "LB": "pound",
    "LBS": "pounds",
    "GAL": "gallon",
    "QT": "quart",
    "PT": "pint",
    "EA": "each",
    # store brands
    "KS": "kirkland signature",
}

ABBREVIATIONS = MappingProxyType(_RECEIPT_ABBREVIATIONS)

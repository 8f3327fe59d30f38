STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "of", "for", "with", "in", "on", "at", "to",
    "per", "approx", "about", "item", "product", "brand",
    "each", "pack", "pkg", "package", "ct", "count",
    "oz", "ounce", "ounces", "lb", "lbs", "pound", "pounds",
    "gal", "gallon", "qt", "quart", "pt", "pint",
})

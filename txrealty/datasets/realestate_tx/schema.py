DATASET = {
    "name": "realestate_tx",
    "source_name": "Texas A&M Real Estate Center (MLS monthly)",
    "grain": "city x year x month",
    "limitations": "Four cities, 2010-2014 only; volume is reported in millions of USD.",
    "cities": ["Beaumont", "Bryan-College Station", "Tyler", "Wichita Falls"],
    "years": [2010, 2011, 2012, 2013, 2014],
    "columns": {
        "city": "string",
        "year": "int64",
        "month": "int64",
        "sales": "int64",
        "listings": "int64",
        "volume": "float64",
        "median_price": "float64",
        "months_inventory": "float64",
    },
    "measures": {
        "sales": "Number of closed sales in the month",
        "listings": "Number of active listings in the month",
        "volume": "Total value of sales (millions USD)",
        "median_price": "Median sale price (USD)",
        "months_inventory": "Months needed to sell all current listings at the current sales pace",
        "avg_price": "Derived: volume / sales * 1,000,000 (USD)",
        "sales_offer_efficiency": "Derived: sales / listings",
    },
}

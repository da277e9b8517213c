"""
Static mappings used by the symptom checker.

- SYMPTOM_SUPPLEMENTS:
    Symptom key -> supplements commonly associated with it. The
    supplement names double as catalog search keywords, so keep them
    short and close to how ingredients are written on product labels.

- SYMPTOM_SYNONYMS:
    Symptom key -> extra lower-case phrases that should trigger the same
    entry. The key itself always matches; list only the alternatives.

Keys are matched as lower-case substrings of the user's text, so
"joint pain in my knees" triggers ``joint pain`` and "always tired"
triggers ``fatigue`` through its synonym ``tired``.
"""

SYMPTOM_SUPPLEMENTS = {
    "fatigue": ["Iron", "Vitamin B12", "Coenzyme Q10", "Magnesium"],
    "joint pain": ["Glucosamine", "Chondroitin", "Omega-3", "Turmeric", "Collagen"],
    "insomnia": ["Melatonin", "Magnesium", "Valerian", "Ashwagandha"],
    "stress": ["Ashwagandha", "Magnesium", "Vitamin B Complex", "L-Theanine"],
    "low immunity": ["Vitamin C", "Zinc", "Vitamin D", "Elderberry", "Echinacea"],
    "cold": ["Vitamin C", "Zinc", "Echinacea", "Elderberry"],
    "bone health": ["Calcium", "Vitamin D", "Vitamin K2", "Magnesium"],
    "digestion": ["Probiotic", "Digestive Enzymes", "Fiber", "Ginger"],
    "hair loss": ["Biotin", "Zinc", "Iron", "Collagen"],
    "dry skin": ["Omega-3", "Collagen", "Vitamin E", "Hyaluronic Acid"],
    "muscle cramps": ["Magnesium", "Potassium", "Calcium"],
    "poor memory": ["Omega-3", "Ginkgo Biloba", "Vitamin B12"],
    "anemia": ["Iron", "Folic Acid", "Vitamin B12", "Vitamin C"],
    "heart health": ["Omega-3", "Coenzyme Q10", "Magnesium"],
    "eye strain": ["Lutein", "Zeaxanthin", "Vitamin A", "Omega-3"],
    "muscle recovery": ["Protein", "Creatine", "BCAA", "Magnesium"],
}

SYMPTOM_SYNONYMS = {
    "fatigue": ["tired", "exhausted", "low energy", "lethargic"],
    "joint pain": ["joint", "arthritis", "stiff knees", "knee pain"],
    "insomnia": ["can't sleep", "cannot sleep", "sleepless", "trouble sleeping", "poor sleep"],
    "stress": ["anxiety", "anxious", "stressed", "tension"],
    "low immunity": ["immunity", "immune", "getting sick", "infections"],
    "cold": ["flu", "sore throat", "runny nose", "cough"],
    "bone health": ["bones", "osteoporosis", "brittle bones"],
    "digestion": ["bloating", "constipation", "indigestion", "gut", "stomach"],
    "hair loss": ["hair fall", "thinning hair", "brittle nails"],
    "dry skin": ["skin", "wrinkles", "eczema"],
    "muscle cramps": ["cramps", "spasms"],
    "poor memory": ["memory", "brain fog", "focus", "concentration"],
    "anemia": ["anaemia", "low iron", "pale"],
    "heart health": ["heart", "cholesterol", "blood pressure"],
    "eye strain": ["eyes", "vision", "screen time"],
    "muscle recovery": ["sore muscles", "workout", "muscle gain"],
}

__all__ = ["SYMPTOM_SUPPLEMENTS", "SYMPTOM_SYNONYMS"]

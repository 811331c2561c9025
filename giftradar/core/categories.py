GIFT_CATEGORIES = [
    {
        "name": "Sustainable & Eco-Friendly",
        "keywords": ["sustainable", "eco-friendly", "green", "recycled", "bamboo", "organic", "plantable", "reusable"],
        "description": "Environmentally conscious gift solutions",
        "suggestions": [
            "Bamboo desk organizers with company branding",
            "Recycled material tote bags",
            "Solar-powered portable chargers",
            "Organic cotton apparel",
            "Plantable seed paper notebooks",
            "Reusable water bottles with filters",
        ],
    },
    {
        "name": "Corporate & Professional",
        "keywords": ["corporate", "business", "professional", "branded", "executive", "premium", "leather", "office"],
        "description": "Gifts for clients, partners and teams",
        "suggestions": [
            "Custom leather portfolios",
            "Branded wireless charging stations",
            "Executive pen sets",
            "Premium coffee gift sets",
            "Personalized desk accessories",
            "High-quality business card holders",
        ],
    },
    {
        "name": "Tech & Innovation",
        "keywords": ["tech", "technology", "smart", "digital", "wireless", "bluetooth", "portable", "gadget"],
        "description": "Technology-enabled gift solutions",
        "suggestions": [
            "Smart home devices",
            "Bluetooth speakers with branding",
            "Wireless earbuds",
            "Portable power banks",
            "Smart watches or fitness trackers",
            "Virtual reality headsets",
        ],
    },
    {
        "name": "Wellness & Self-Care",
        "keywords": ["wellness", "health", "self-care", "mindfulness", "meditation", "yoga", "stress", "ergonomic"],
        "description": "Health and wellness focused gifts",
        "suggestions": [
            "Meditation and mindfulness kits",
            "Essential oil diffusers",
            "Yoga mats with company logo",
            "Stress relief items",
            "Ergonomic office accessories",
            "Healthy snack boxes",
        ],
    },
    {
        "name": "Experience & Subscription",
        "keywords": ["experience", "subscription", "voucher", "virtual", "online", "digital", "streaming", "learning"],
        "description": "Experience-based and subscription gifts",
        "suggestions": [
            "Online learning platform subscriptions",
            "Virtual team building experiences",
            "Monthly coffee or tea subscriptions",
            "Digital magazine subscriptions",
            "Streaming service gift cards",
            "Virtual cooking or wine tasting classes",
        ],
    },
    {
        "name": "Luxury & Premium",
        "keywords": ["luxury", "premium", "high-end", "exclusive", "spa", "wine", "whiskey", "artwork"],
        "description": "High-end gifts for important clients and stakeholders",
        "suggestions": [
            "Premium leather goods",
            "High-end wine or whiskey sets",
            "Luxury spa packages",
            "Custom artwork or sculptures",
            "Premium electronics accessories",
            "Exclusive event access or tickets",
        ],
    },
]

# Coarser buckets for the distribution chart
TREND_CATEGORIES = [
    {"name": "Sustainable", "keywords": ["sustainable", "eco-friendly", "green"]},
    {"name": "Technology", "keywords": ["tech", "technology", "digital"]},
    {"name": "Wellness", "keywords": ["wellness", "health"]},
    {"name": "Personalized", "keywords": ["personalized", "custom", "branded"]},
    {"name": "Experience", "keywords": ["experience", "subscription"]},
    {"name": "Premium", "keywords": ["luxury", "premium"]},
]

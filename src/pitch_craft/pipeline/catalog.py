"""Static lookup tables for pitch generation.

Industry order matters: the classifier returns the first industry whose
keywords match, so earlier entries win ties.
"""

from pitch_craft.pipeline.records import RevenueModel

DEFAULT_INDUSTRY = "tech"

INDUSTRY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "tech": ("software", "app", "platform", "digital", "cloud", "ai", "ml", "data"),
    "health": ("health", "medical", "fitness", "wellness", "therapy", "mental"),
    "education": ("education", "learning", "student", "course", "teacher", "school"),
    "finance": ("finance", "payment", "money", "banking", "investment", "crypto"),
    "social": ("social", "community", "networking", "connection", "sharing"),
    "ecommerce": ("shop", "marketplace", "commerce", "retail", "buying", "selling"),
    "sustainability": ("green", "eco", "sustainable", "environment", "carbon", "renewable"),
}

COMPETITOR_SUGGESTIONS: dict[str, tuple[str, ...]] = {
    "tech": ("TechCorp Inc.", "InnovateLabs", "CloudSync Solutions", "DataFlow Systems", "NextGen Analytics"),
    "health": ("HealthTech Pro", "WellnessWorks", "MedConnect", "FitLife Solutions", "CareLink Systems"),
    "education": ("EduTech Solutions", "LearnSmart", "StudyBuddy Pro", "ClassroomCloud", "SkillBuilder"),
    "finance": ("FinTech Forward", "PayEasy Systems", "MoneyMaster", "InvestSmart", "CryptoConnect"),
    "social": ("SocialSphere", "ConnectHub", "CommunityLink", "ShareSpace", "NetworkNow"),
    "ecommerce": ("ShopSmart", "MarketPlace Pro", "RetailRevolution", "BuyNow Solutions", "CommerceCloud"),
    "sustainability": ("GreenTech Solutions", "EcoInnovate", "SustainableSystems", "CarbonZero", "CleanTech Pro"),
}

REVENUE_MODEL_TEMPLATES: tuple[RevenueModel, ...] = (
    RevenueModel("Freemium", "Free basic features with premium paid upgrades"),
    RevenueModel("Subscription (SaaS)", "Monthly/yearly recurring revenue model"),
    RevenueModel("Marketplace Commission", "Take a percentage of transactions between users"),
    RevenueModel("Advertising", "Revenue from targeted ads and sponsored content"),
    RevenueModel("Enterprise Licensing", "Sell licenses to large organizations"),
    RevenueModel("Pay-per-Use", "Charge based on usage or consumption"),
    RevenueModel("Hardware + Software", "Combined product and service revenue"),
    RevenueModel("Consulting & Services", "Professional services around your core product"),
    RevenueModel("White Label Licensing", "License your technology to other companies"),
    RevenueModel("Data Monetization", "Generate revenue from anonymized data insights"),
)

TAGLINE_ACTIONS: tuple[str, ...] = ("Transform", "Revolutionize", "Simplify", "Empower", "Accelerate")

SLIDE_BOILERPLATE: tuple[str, ...] = (
    "Business Model: Multiple revenue streams with scalable growth potential",
    "Traction: Early validation and growing customer interest",
    "Team: Experienced founders with domain expertise",
    "Funding: Seeking investment to accelerate growth and market expansion",
)

COMPETITOR_COUNT = 4
REVENUE_MODEL_COUNT = 4

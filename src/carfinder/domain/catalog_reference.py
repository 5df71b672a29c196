"""Static catalog tables used when the upstream catalog cannot be reached."""

from __future__ import annotations

POPULAR_BRANDS = (
    "Toyota",
    "Honda",
    "Ford",
    "BMW",
    "Mercedes",
    "Audi",
    "Tesla",
    "Nissan",
    "Suzuki",
)

FALLBACK_MODELS: dict[str, tuple[str, ...]] = {
    "Toyota": ("Camry", "Corolla", "RAV4", "Highlander", "Supra", "Land Cruiser", "Yaris"),
    "Honda": ("Civic", "Accord", "CR-V", "Pilot", "Fit", "HR-V", "Odyssey"),
    "Ford": ("F-150", "Escape", "Explorer", "Mustang", "Focus", "Ranger", "Bronco"),
    "BMW": ("3 Series", "5 Series", "X3", "X5", "M3", "M5", "i8"),
    "Mercedes": ("C-Class", "E-Class", "GLC", "S-Class", "AMG GT", "G-Wagon", "EQS"),
    "Audi": ("A4", "A6", "Q5", "Q7", "R8", "e-tron", "TT"),
    "Tesla": ("Model 3", "Model S", "Model X", "Model Y", "Cybertruck", "Roadster"),
    "Nissan": ("Altima", "Maxima", "Rogue", "Pathfinder", "GTR", "370Z", "Leaf"),
    "Suzuki": ("Swift", "Vitara", "Jimny", "S-Cross", "Ignis", "Baleno"),
    "Hyundai": ("Elantra", "Sonata", "Tucson", "Santa Fe", "Palisade", "Kona"),
    "Kia": ("Forte", "Optima", "Sportage", "Sorento", "Telluride", "Soul"),
    "Chevrolet": ("Malibu", "Impala", "Equinox", "Tahoe", "Silverado", "Corvette", "Camaro"),
    "Lexus": ("ES", "IS", "RX", "GX", "LX", "LC", "LS"),
    "Acura": ("ILX", "TLX", "RDX", "MDX", "NSX"),
}

FALLBACK_BRANDS = tuple(FALLBACK_MODELS)

FALLBACK_BODY_TYPES = ("Sedan", "SUV", "Hatchback", "Convertible", "Coupe", "Pickup")

BRAND_IMAGE_URLS: dict[str, str] = {
    "Toyota": "https://images.pexels.com/photos/112460/pexels-photo-112460.jpeg",
    "Honda": "https://images.pexels.com/photos/210019/pexels-photo-210019.jpeg",
    "Ford": "https://images.pexels.com/photos/116675/pexels-photo-116675.jpeg",
    "BMW": "https://images.pexels.com/photos/100656/pexels-photo-100656.jpeg",
    "Mercedes": "https://images.pexels.com/photos/120049/pexels-photo-120049.jpeg",
    "Audi": "https://images.pexels.com/photos/244206/pexels-photo-244206.jpeg",
    "Tesla": "https://images.pexels.com/photos/3729464/pexels-photo-3729464.jpeg",
    "Nissan": "https://images.pexels.com/photos/1149137/pexels-photo-1149137.jpeg",
    "Suzuki": "https://images.pexels.com/photos/170811/pexels-photo-170811.jpeg",
    "Hyundai": "https://images.pexels.com/photos/627678/pexels-photo-627678.jpeg",
    "Kia": "https://images.pexels.com/photos/1035108/pexels-photo-1035108.jpeg",
    "Chevrolet": "https://images.pexels.com/photos/337909/pexels-photo-337909.jpeg",
    "Lexus": "https://images.pexels.com/photos/248687/pexels-photo-248687.jpeg",
    "Acura": "https://images.pexels.com/photos/248747/pexels-photo-248747.jpeg",
}

PLACEHOLDER_IMAGE_URL = "https://images.pexels.com/photos/3166786/pexels-photo-3166786.jpeg"

# Query token -> (brand, model) tried when a free-text search matches nothing
SPECIFIC_MODEL_ALIASES: dict[str, tuple[str, str]] = {
    "gtr": ("Nissan", "GTR"),
    "swift": ("Suzuki", "Swift"),
    "skyline": ("Nissan", "GTR"),
    "mustang": ("Ford", "Mustang"),
    "camaro": ("Chevrolet", "Camaro"),
    "corvette": ("Chevrolet", "Corvette"),
    "civic": ("Honda", "Civic"),
    "corolla": ("Toyota", "Corolla"),
}

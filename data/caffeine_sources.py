CAFFEINE_SOURCES = [
    # Coffee
    {"name": "Coffee (brewed, 8oz)", "category": "Coffee", "caffeine_mg": 95, "serving": "8 oz cup"},
    {"name": "Espresso (1 shot)", "category": "Coffee", "caffeine_mg": 64, "serving": "1 oz shot"},
    {"name": "Cold Brew (12oz)", "category": "Coffee", "caffeine_mg": 200, "serving": "12 oz"},
    {"name": "Instant Coffee (8oz)", "category": "Coffee", "caffeine_mg": 62, "serving": "8 oz cup"},
    {"name": "Decaf Coffee (8oz)", "category": "Coffee", "caffeine_mg": 2, "serving": "8 oz cup"},
    # Tea
    {"name": "Black Tea (8oz)", "category": "Tea", "caffeine_mg": 47, "serving": "8 oz cup"},
    {"name": "Green Tea (8oz)", "category": "Tea", "caffeine_mg": 28, "serving": "8 oz cup"},
    {"name": "White Tea (8oz)", "category": "Tea", "caffeine_mg": 15, "serving": "8 oz cup"},
    {"name": "Oolong Tea (8oz)", "category": "Tea", "caffeine_mg": 38, "serving": "8 oz cup"},
    {"name": "Matcha (1 tsp)", "category": "Tea", "caffeine_mg": 70, "serving": "1 tsp powder"},
    # Soda
    {"name": "Cola (12oz)", "category": "Soda", "caffeine_mg": 34, "serving": "12 oz can"},
    {"name": "Citrus Soda (12oz)", "category": "Soda", "caffeine_mg": 54, "serving": "12 oz can"},
    {"name": "Pepper Soda (12oz)", "category": "Soda", "caffeine_mg": 41, "serving": "12 oz can"},
    # Energy drinks
    {"name": "Energy Drink (8.4oz)", "category": "Energy Drink", "caffeine_mg": 80, "serving": "8.4 oz can"},
    {"name": "Energy Drink (16oz)", "category": "Energy Drink", "caffeine_mg": 160, "serving": "16 oz can"},
    {"name": "Energy Shot (2oz)", "category": "Energy Drink", "caffeine_mg": 200, "serving": "2 oz bottle"},
    # Food
    {"name": "Dark Chocolate (1oz)", "category": "Food", "caffeine_mg": 23, "serving": "1 oz"},
    {"name": "Milk Chocolate (1oz)", "category": "Food", "caffeine_mg": 6, "serving": "1 oz"},
    {"name": "Hot Chocolate (8oz)", "category": "Food", "caffeine_mg": 5, "serving": "8 oz cup"},
    # Supplements
    {"name": "Caffeine Pill (200mg)", "category": "Supplement", "caffeine_mg": 200, "serving": "1 pill"},
    {"name": "Pre-Workout (serving)", "category": "Supplement", "caffeine_mg": 150, "serving": "1 scoop"},
]

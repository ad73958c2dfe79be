"""Static sample foods for search and recommendations."""

from calorie_coach.domain.foods import FoodItem

SAMPLE_FOODS: tuple[FoodItem, ...] = (
    FoodItem("1", "Chicken Breast", 165, 31, 0, 3.6, "cutting"),
    FoodItem("2", "Brown Rice", 216, 5, 45, 1.8, "general"),
    FoodItem("3", "Salmon", 208, 20, 0, 13, "bulking"),
    FoodItem("4", "Avocado", 240, 3, 12, 22, "bulking"),
    FoodItem("5", "Broccoli", 55, 3.7, 11, 0.6, "cutting"),
    FoodItem("6", "Greek Yogurt", 100, 17, 6, 0.4, "cutting"),
)

_IMAGE_BASE = "https://images.unsplash.com"

RECOMMENDATIONS: dict[str, tuple[FoodItem, ...]] = {
    "cutting": (
        FoodItem(
            "1",
            "Grilled Chicken Salad",
            320,
            35,
            12,
            14,
            "cutting",
            f"{_IMAGE_BASE}/photo-1546069901-ba9599a7e63c?w=300&q=80",
        ),
        FoodItem(
            "2",
            "Salmon with Steamed Vegetables",
            380,
            32,
            15,
            18,
            "cutting",
            f"{_IMAGE_BASE}/photo-1467003909585-2f8a72700288?w=300&q=80",
        ),
        FoodItem(
            "3",
            "Greek Yogurt with Berries",
            220,
            18,
            24,
            5,
            "cutting",
            f"{_IMAGE_BASE}/photo-1488477181946-6428a0291777?w=300&q=80",
        ),
    ),
    "bulking": (
        FoodItem(
            "4",
            "Protein Smoothie with Banana",
            450,
            30,
            55,
            10,
            "bulking",
            f"{_IMAGE_BASE}/photo-1577805947697-89e18249d767?w=300&q=80",
        ),
        FoodItem(
            "5",
            "Steak with Sweet Potato",
            580,
            40,
            45,
            22,
            "bulking",
            f"{_IMAGE_BASE}/photo-1544025162-d76694265947?w=300&q=80",
        ),
        FoodItem(
            "6",
            "Peanut Butter Oatmeal",
            520,
            20,
            65,
            18,
            "bulking",
            f"{_IMAGE_BASE}/photo-1495214783159-3503fd1b572d?w=300&q=80",
        ),
    ),
    "health": (
        FoodItem(
            "7",
            "Quinoa Bowl with Avocado",
            380,
            15,
            45,
            16,
            "health",
            f"{_IMAGE_BASE}/photo-1512621776951-a57141f2eefd?w=300&q=80",
        ),
        FoodItem(
            "8",
            "Mediterranean Salad",
            310,
            12,
            30,
            15,
            "health",
            f"{_IMAGE_BASE}/photo-1540420773420-3366772f4999?w=300&q=80",
        ),
        FoodItem(
            "9",
            "Vegetable Soup with Lentils",
            250,
            14,
            35,
            5,
            "health",
            f"{_IMAGE_BASE}/photo-1547592180-85f173990554?w=300&q=80",
        ),
    ),
}

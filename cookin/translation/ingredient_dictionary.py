from __future__ import annotations

# Korean ingredient -> English name used when querying western recipes.
# Order matters for partial lookups: the first contained key wins.
KO_TO_EN = {
    # vegetables
    "양파": "onion",
    "당근": "carrot",
    "감자": "potato",
    "토마토": "tomato",
    "마늘": "garlic",
    "파": "green onion",
    "대파": "scallion",
    "상추": "lettuce",
    "배추": "cabbage",
    "양배추": "cabbage",
    "시금치": "spinach",
    "브로콜리": "broccoli",
    "오이": "cucumber",
    "가지": "eggplant",
    "호박": "zucchini",
    "고추": "pepper",
    "피망": "bell pepper",
    "버섯": "mushroom",
    "생강": "ginger",
    "고구마": "sweet potato",
    "옥수수": "corn",
    "콩": "bean",
    "콩나물": "bean sprout",
    "깻잎": "perilla leaf",
    "부추": "chive",
    # meat
    "소고기": "beef",
    "돼지고기": "pork",
    "닭고기": "chicken",
    "닭": "chicken",
    "오리": "duck",
    "양고기": "lamb",
    "베이컨": "bacon",
    "햄": "ham",
    "소시지": "sausage",
    "삼겹살": "pork belly",
    "치킨": "chicken",
    "닭다리": "chicken leg",
    "닭가슴살": "chicken breast",
    # seafood
    "생선": "fish",
    "연어": "salmon",
    "참치": "tuna",
    "고등어": "mackerel",
    "새우": "shrimp",
    "게": "crab",
    "오징어": "squid",
    "문어": "octopus",
    "굴": "oyster",
    "홍합": "mussel",
    "조개": "clam",
    "미역": "seaweed",
    "김": "seaweed",
    # dairy / eggs
    "계란": "egg",
    "달걀": "egg",
    "우유": "milk",
    "치즈": "cheese",
    "버터": "butter",
    "요구르트": "yogurt",
    # grains / noodles
    "쌀": "rice",
    "밥": "rice",
    "국수": "noodle",
    "라면": "ramen",
    "스파게티": "spaghetti",
    "파스타": "pasta",
    "면": "noodle",
    "떡": "rice cake",
    "밀가루": "flour",
    "빵": "bread",
    # seasonings
    "소금": "salt",
    "설탕": "sugar",
    "후추": "pepper",
    "고춧가루": "red pepper powder",
    "고추장": "gochujang",
    "된장": "doenjang",
    "간장": "soy sauce",
    "식초": "vinegar",
    "올리브오일": "olive oil",
    "식용유": "cooking oil",
    "참기름": "sesame oil",
    "마요네즈": "mayonnaise",
    "케첩": "ketchup",
    "꿀": "honey",
    # fruit
    "사과": "apple",
    "배": "pear",
    "딸기": "strawberry",
    "바나나": "banana",
    "오렌지": "orange",
    "레몬": "lemon",
    "포도": "grape",
    "수박": "watermelon",
    "복숭아": "peach",
    "키위": "kiwi",
    "파인애플": "pineapple",
    "망고": "mango",
    "아보카도": "avocado",
    # nuts
    "땅콩": "peanut",
    "호두": "walnut",
    "아몬드": "almond",
    "잣": "pine nut",
    "밤": "chestnut",
    # other
    "두부": "tofu",
    "순두부": "soft tofu",
}


def to_english(name: str) -> str:
    """
    Map a Korean ingredient name to English.

    Exact hits win; otherwise the first key contained in the name
    ("양파 1개" -> "onion"). Unknown names (already English, most likely)
    come back trimmed.
    """
    trimmed = name.strip()
    if trimmed in KO_TO_EN:
        return KO_TO_EN[trimmed]
    for key, english in KO_TO_EN.items():
        if key in trimmed:
            return english
    return trimmed


def to_english_list(names: list[str]) -> list[str]:
    return [to_english(n) for n in names]

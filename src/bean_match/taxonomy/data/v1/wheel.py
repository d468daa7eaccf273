"""SCA-style coffee flavor wheel with Korean labels.

LEVEL2 maps each category to its subcategories, LEVEL3 maps subcategories to
notes and LEVEL4 maps notes to descriptors.
"""

LEVEL2 = {
    "Fruity": ["Berry", "Dried Fruit", "Other Fruit", "Citrus Fruit"],
    "Sour/Fermented": ["Sour", "Fermented"],
    "Green/Vegetative": ["Olive Oil", "Raw", "Green/Vegetative"],
    "Other": ["Papery/Musty", "Chemical"],
    "Roasted": ["Pipe Tobacco", "Tobacco", "Burnt", "Cereal"],
    "Spices": ["Pungent", "Pepper", "Brown Spice"],
    "Nutty/Cocoa": ["Nutty", "Cocoa"],
    "Sweet": ["Brown Sugar", "Vanilla", "Overall Sweet", "Sweet Aromatics"],
    "Floral": ["Black Tea", "Floral"],
}

LEVEL3 = {
    # Fruity
    "Berry": ["Blackberry", "Raspberry", "Blueberry", "Strawberry"],
    "Dried Fruit": ["Raisin", "Prune"],
    "Other Fruit": ["Coconut", "Cherry", "Pomegranate", "Pineapple", "Grape", "Apple", "Peach", "Pear"],
    "Citrus Fruit": ["Grapefruit", "Orange", "Lemon", "Lime"],
    # Sour/Fermented
    "Sour": ["Sour Aromatics", "Acetic Acid", "Butyric Acid", "Isovaleric Acid", "Citric Acid", "Malic Acid"],
    "Fermented": ["Winey", "Whiskey", "Fermented", "Overripe"],
    # Green/Vegetative
    "Olive Oil": ["Olive Oil"],
    "Raw": ["Raw"],
    "Green/Vegetative": ["Under-ripe", "Peapod", "Fresh", "Dark Green", "Vegetative", "Hay-like", "Herb-like"],
    # Other
    "Papery/Musty": [
        "Stale",
        "Cardboard",
        "Papery",
        "Woody",
        "Moldy/Damp",
        "Musty/Dusty",
        "Musty/Earthy",
        "Animalic",
        "Meaty Brothy",
        "Phenolic",
    ],
    "Chemical": ["Bitter", "Salty", "Medicinal", "Petroleum", "Skunky", "Rubber"],
    # Roasted
    "Pipe Tobacco": ["Pipe Tobacco"],
    "Tobacco": ["Tobacco", "Cigarette", "Cigar", "Fresh Tobacco"],
    "Burnt": ["Acrid", "Ashy", "Smoky", "Brown, Roast"],
    "Cereal": ["Grain", "Malt"],
    # Spices
    "Pungent": ["Pungent"],
    "Pepper": ["Pepper"],
    "Brown Spice": ["Anise", "Nutmeg", "Cinnamon", "Clove"],
    # Nutty/Cocoa
    "Nutty": ["Peanuts", "Hazelnut", "Almond"],
    "Cocoa": ["Cocoa", "Dark Chocolate"],
    # Sweet
    "Brown Sugar": ["Molasses", "Maple Syrup", "Caramelized", "Honey"],
    "Vanilla": ["Vanilla"],
    "Overall Sweet": ["Overall Sweet"],
    "Sweet Aromatics": ["Sweet Aromatics"],
    # Floral
    "Black Tea": ["Black Tea"],
    "Floral": ["Chamomile", "Rose", "Jasmine"],
}

LEVEL4 = {
    # Fruity
    "Blackberry": ["Fresh", "Ripe", "Jammy"],
    "Raspberry": ["Fresh", "Ripe", "Jammy"],
    "Blueberry": ["Fresh", "Ripe", "Dried"],
    "Strawberry": ["Fresh", "Ripe", "Green"],
    "Raisin": ["Dried", "Sweet"],
    "Prune": ["Dried", "Sweet", "Sticky"],
    "Coconut": ["Fresh", "Dried", "Toasted"],
    "Cherry": ["Fresh", "Dried"],
    "Pomegranate": ["Fresh", "Tart", "Sweet"],
    "Pineapple": ["Fresh", "Tropical", "Sweet"],
    "Grape": ["Fresh", "Ripe", "Wine-like"],
    "Apple": ["Fresh", "Cooked", "Green"],
    "Peach": ["Fresh", "Ripe", "Fuzzy"],
    "Pear": ["Fresh", "Ripe", "Crisp"],
    "Grapefruit": ["Fresh", "Bitter", "Zest"],
    "Orange": ["Fresh", "Zest"],
    "Lemon": ["Fresh", "Zest", "Juice"],
    "Lime": ["Fresh", "Zest"],
    # Sour/Fermented
    "Sour Aromatics": ["Tangy", "Sharp", "Vinegar-like"],
    "Acetic Acid": ["Vinegar", "Sharp"],
    "Butyric Acid": ["Rancid", "Cheesy"],
    "Isovaleric Acid": ["Sweaty", "Rancid"],
    "Citric Acid": ["Citrus", "Bright"],
    "Malic Acid": ["Apple-like", "Tart"],
    "Winey": ["Fermented", "Alcoholic"],
    "Whiskey": ["Alcoholic", "Woody"],
    "Fermented": ["Yeasty", "Alcoholic"],
    "Overripe": ["Musty", "Past-prime"],
    # Green/Vegetative
    "Olive Oil": ["Oily", "Fruity", "Bitter"],
    "Raw": ["Uncooked", "Fresh"],
    "Under-ripe": ["Green", "Astringent"],
    "Peapod": ["Green", "Fresh"],
    "Fresh": ["Green", "Crisp"],
    "Dark Green": ["Leafy", "Chlorophyll"],
    "Vegetative": ["Plant-like", "Grassy"],
    "Hay-like": ["Dried", "Grassy"],
    "Herb-like": ["Aromatic", "Leafy"],
    # Other
    "Stale": ["Old", "Flat"],
    "Cardboard": ["Papery", "Dry"],
    "Papery": ["Dry", "Flat"],
    "Woody": ["Tree-like", "Dry"],
    "Moldy/Damp": ["Musty", "Wet"],
    "Musty/Dusty": ["Stale", "Dry"],
    "Musty/Earthy": ["Soil-like", "Damp"],
    "Animalic": ["Leather", "Barnyard"],
    "Meaty Brothy": ["Savory", "Umami"],
    "Phenolic": ["Medicinal", "Band-aid"],
    "Bitter": ["Harsh", "Astringent"],
    "Salty": ["Briny", "Mineral"],
    "Medicinal": ["Chemical", "Antiseptic"],
    "Petroleum": ["Gasoline", "Chemical"],
    "Skunky": ["Sulfurous", "Offensive"],
    "Rubber": ["Tire-like", "Burnt"],
    # Roasted
    "Pipe Tobacco": ["Smoky", "Aromatic"],
    "Tobacco": ["Dry", "Sweet", "Earthy"],
    "Cigarette": ["Harsh", "Burnt"],
    "Cigar": ["Rich", "Smooth"],
    "Fresh Tobacco": ["Green", "Leafy"],
    "Acrid": ["Harsh", "Bitter"],
    "Ashy": ["Burnt", "Mineral"],
    "Smoky": ["Wood-fired", "Burnt"],
    "Brown, Roast": ["Toasted", "Caramelized"],
    "Grain": ["Cereal", "Wheaty"],
    "Malt": ["Barley", "Sweet"],
    # Spices
    "Pungent": ["Sharp", "Intense"],
    "Pepper": ["Spicy", "Hot"],
    "Anise": ["Licorice", "Sweet"],
    "Nutmeg": ["Warm", "Spicy"],
    "Cinnamon": ["Sweet", "Warm"],
    "Clove": ["Intense", "Numbing"],
    # Nutty/Cocoa
    "Peanuts": ["Roasted", "Buttery"],
    "Hazelnut": ["Raw", "Roasted"],
    "Almond": ["Raw", "Roasted"],
    "Cocoa": ["Bitter", "Rich"],
    "Dark Chocolate": ["Bitter", "Sweet", "Cocoa"],
    # Sweet
    "Molasses": ["Dark", "Thick"],
    "Maple Syrup": ["Sweet", "Woody"],
    "Caramelized": ["Burnt Sugar", "Sweet"],
    "Honey": ["Mild", "Intense"],
    "Vanilla": ["Sweet", "Creamy"],
    "Overall Sweet": ["Sugar-like", "Pleasant"],
    "Sweet Aromatics": ["Fragrant", "Pleasant"],
    # Floral
    "Black Tea": ["Astringent", "Dry"],
    "Chamomile": ["Delicate", "Honey-like"],
    "Rose": ["Subtle", "Perfumed"],
    "Jasmine": ["Delicate", "Intense"],
}

KOREAN = {
    # Categories
    "Fruity": "과일",
    "Sour/Fermented": "신맛/발효",
    "Green/Vegetative": "풀/채소",
    "Other": "기타",
    "Roasted": "로스팅",
    "Spices": "향신료",
    "Nutty/Cocoa": "견과/코코아",
    "Sweet": "단맛",
    "Floral": "꽃",
    # Subcategories
    "Berry": "베리",
    "Dried Fruit": "건과일",
    "Other Fruit": "기타 과일",
    "Citrus Fruit": "시트러스",
    "Sour": "신맛",
    "Fermented": "발효",
    "Olive Oil": "올리브 오일",
    "Raw": "날것",
    "Papery/Musty": "종이/퀴퀴함",
    "Chemical": "화학적",
    "Pipe Tobacco": "파이프 담배",
    "Tobacco": "담배",
    "Burnt": "탄맛",
    "Cereal": "곡물",
    "Pungent": "자극적인",
    "Pepper": "후추",
    "Brown Spice": "브라운 스파이스",
    "Nutty": "견과류",
    "Cocoa": "코코아",
    "Brown Sugar": "흑설탕",
    "Vanilla": "바닐라",
    "Overall Sweet": "전체적인 단맛",
    "Sweet Aromatics": "달콤한 향",
    "Black Tea": "홍차",
    # Notes
    "Blackberry": "블랙베리",
    "Raspberry": "라즈베리",
    "Blueberry": "블루베리",
    "Strawberry": "딸기",
    "Raisin": "건포도",
    "Prune": "말린 자두",
    "Coconut": "코코넛",
    "Cherry": "체리",
    "Pomegranate": "석류",
    "Pineapple": "파인애플",
    "Grape": "포도",
    "Apple": "사과",
    "Peach": "복숭아",
    "Pear": "배",
    "Grapefruit": "자몽",
    "Orange": "오렌지",
    "Lemon": "레몬",
    "Lime": "라임",
    "Sour Aromatics": "새콤한 향",
    "Acetic Acid": "아세트산",
    "Butyric Acid": "부티르산",
    "Isovaleric Acid": "이소발레르산",
    "Citric Acid": "구연산",
    "Malic Acid": "사과산",
    "Winey": "와인",
    "Whiskey": "위스키",
    "Overripe": "과숙",
    "Under-ripe": "덜 익은",
    "Peapod": "완두콩 껍질",
    "Fresh": "신선한",
    "Dark Green": "짙은 풀",
    "Vegetative": "채소",
    "Hay-like": "건초",
    "Herb-like": "허브",
    "Stale": "묵은",
    "Cardboard": "판지",
    "Papery": "종이",
    "Woody": "나무",
    "Moldy/Damp": "곰팡이/눅눅함",
    "Musty/Dusty": "퀴퀴함/먼지",
    "Musty/Earthy": "퀴퀴함/흙",
    "Animalic": "동물성",
    "Meaty Brothy": "육수",
    "Phenolic": "페놀",
    "Bitter": "쓴맛",
    "Salty": "짠맛",
    "Medicinal": "약품",
    "Petroleum": "석유",
    "Skunky": "스컹크",
    "Rubber": "고무",
    "Cigarette": "궐련",
    "Cigar": "시가",
    "Fresh Tobacco": "생담배",
    "Acrid": "매캐한",
    "Ashy": "재",
    "Smoky": "스모키",
    "Brown, Roast": "브라운 로스트",
    "Grain": "곡물",
    "Malt": "맥아",
    "Anise": "아니스",
    "Nutmeg": "육두구",
    "Cinnamon": "시나몬",
    "Clove": "정향",
    "Peanuts": "땅콩",
    "Hazelnut": "헤이즐넛",
    "Almond": "아몬드",
    "Dark Chocolate": "다크 초콜릿",
    "Molasses": "당밀",
    "Maple Syrup": "메이플 시럽",
    "Caramelized": "캐러멜",
    "Honey": "꿀",
    "Chamomile": "캐모마일",
    "Rose": "장미",
    "Jasmine": "자스민",
}

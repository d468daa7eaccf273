"""Sensory vocabulary used to read roaster notes.

Keywords are matched as lowercase substrings, so multi-word entries and
Korean stems both work. A keyword only counts for its band when it is not
part of a phrase listed under another band of the same attribute, which
keeps "sweet" from answering for "not sweet".
"""

from types import MappingProxyType

SENSORY_KEYWORDS = MappingProxyType(
    {
        "body": MappingProxyType(
            {
                "light": ("light", "delicate", "tea-like", "thin", "가벼운", "가벼움", "산뜻한 바디"),
                "medium": ("medium body", "medium-bodied", "round", "중간 바디", "적당한 바디"),
                "heavy": ("heavy", "full body", "full-bodied", "syrupy", "thick", "bold", "무거운", "묵직", "진한 바디"),
            }
        ),
        "acidity": MappingProxyType(
            {
                "low": ("low acid", "mild", "soft acidity", "낮은 산미", "부드러운 산미"),
                "medium": ("medium acidity", "moderate acidity", "적당한 산미"),
                "high": (
                    "bright", "vibrant", "lively", "citric", "tart", "tangy",
                    "밝은 산미", "산뜻한 산미", "화사한 산미", "산미가 강", "상큼",
                ),
            }
        ),
        "sweetness": MappingProxyType(
            {
                "low": ("dry", "not sweet", "드라이"),
                "medium": ("moderate sweetness", "subtle sweetness", "은은한 단맛"),
                "high": ("sweet", "honey", "caramel", "sugar", "syrup", "candy", "달콤", "단맛이 강", "꿀"),
            }
        ),
        "finish": MappingProxyType(
            {
                "short": ("short finish", "quick finish", "짧은 여운", "깔끔하게 끝"),
                "medium": ("medium finish", "moderate finish", "적당한 여운"),
                "long": ("long", "lingering", "lasting", "persistent", "긴 여운", "여운이 긴"),
            }
        ),
        "mouthfeel": MappingProxyType(
            {
                "Clean": ("clean", "clear", "깔끔", "클린"),
                "Creamy": ("creamy", "buttery", "velvety", "크리미", "크림"),
                "Juicy": ("juicy", "succulent", "쥬시", "과즙"),
                "Silky": ("silky", "smooth", "실키", "매끄러운"),
            }
        ),
    }
)

COMPLEXITY_TERMS = ("balanced", "complex", "layered", "균형", "복합", "복잡")

"""정적 레시피 카탈로그 (목업 데이터)

추천, 레시피 목록, 조리 진행, 음성 보조가 모두 같은 카탈로그를 사용한다.
재료의 match 키워드는 보유 재료와의 부분 문자열 매칭에 쓰인다.
match가 빈 튜플이면 보유 여부와 상관없이 항상 '없음'으로 취급한다.
"""
from typing import Any, Optional

RECIPE_CATEGORIES = ("전체", "한식", "양식", "중식", "일식", "기타")
ALL_CATEGORY = "전체"


def _ing(
    name: str,
    amount: str,
    *,
    allergen: Optional[str] = None,
    alternatives: Optional[list[str]] = None,
    optional: bool = False,
    match: Optional[tuple[str, ...]] = None,
    always: bool = False,
) -> dict[str, Any]:
    return {
        "name": name,
        "amount": amount,
        "allergen": allergen,
        "alternatives": alternatives or [],
        "optional": optional,
        "match": (name,) if match is None else match,
        "always": always,
    }


def _step(instruction: str, duration: int, tip: str) -> dict[str, Any]:
    return {"instruction": instruction, "duration": duration, "tip": tip}


RECIPES: list[dict[str, Any]] = [
    {
        "id": "1",
        "name": "김치볶음밥",
        "category": "한식",
        "difficulty": "초급",
        "cookingTime": 20,
        "servings": 2,
        "calories": 450,
        "description": "간단하고 빠르게 만들 수 있는 한국의 대표 요리",
        "image": "https://images.unsplash.com/photo-1744870132190-5c02d3f8d9f9?w=400&h=225&fit=crop",
        "tags": ["한식", "간편식", "볶음밥"],
        "ingredients": [
            _ing("김치", "1컵", alternatives=["배추김치", "묵은지"]),
            _ing("밥", "2공기", match=("쌀", "밥")),
            _ing("달걀", "2개", allergen="달걀", alternatives=["계란후라이 없이"]),
            _ing("식용유", "2큰술", alternatives=["참기름", "올리브유"]),
            _ing("참기름", "1작은술", optional=True),
            _ing("김가루", "약간", optional=True, alternatives=["참깨", "없이"], match=()),
        ],
        "steps": [
            _step("먼저 프라이팬에 식용유 2스푼을 두르고 중불로 달궈주세요.", 1,
                  "프라이팬이 충분히 달궈져야 김치가 눌어붙지 않습니다."),
            _step("김치를 적당한 크기로 썰어서 넣고 2-3분간 볶아주세요.", 3,
                  "김치가 노릇노릇해질 때까지 볶으면 더 맛있습니다."),
            _step("밥 2공기를 넣고 주걱으로 으깨면서 잘 섞어주세요.", 4,
                  "밥이 따뜻하면 더 잘 섞입니다. 전날 밥은 미리 데워주세요."),
            _step("참기름 1스푼을 두르고 30초간 더 볶아주세요.", 1,
                  "참기름은 마지막에 넣어야 고소한 향이 살아납니다."),
            _step("다른 프라이팬에 계란후라이를 만들어주세요.", 2,
                  "노른자는 반숙으로 익히면 볶음밥과 잘 어울립니다."),
            _step("그릇에 담고 계란후라이와 김가루를 올려서 완성합니다.", 1,
                  "김은 먹기 직전에 올려야 바삭합니다."),
        ],
        "tips": [
            "김치는 너무 묵은 것보다 적당히 익은 것이 좋습니다",
            "밥은 찬밥을 사용하면 더 잘 볶아집니다",
            "마지막에 참기름을 넣으면 고소한 향이 납니다",
        ],
        "nutrition": {"protein": 15, "carbs": 65, "fat": 18},
    },
    {
        "id": "2",
        "name": "스파게티 까르보나라",
        "category": "양식",
        "difficulty": "중급",
        "cookingTime": 30,
        "servings": 2,
        "calories": 680,
        "description": "크리미한 소스가 일품인 이탈리아 파스타",
        "image": "https://images.unsplash.com/photo-1588013273468-315fd88ea34c?w=400&h=225&fit=crop",
        "tags": ["양식", "파스타", "크림"],
        "ingredients": [
            _ing("스파게티 면", "200g", allergen="밀", match=("면", "스파게티", "파스타")),
            _ing("베이컨", "100g", allergen="돼지고기", alternatives=["햄", "소시지"]),
            _ing("달걀", "2개", allergen="달걀"),
            _ing("생크림", "100ml", allergen="유제품", alternatives=["우유"], match=("생크림", "우유")),
            _ing("파르메산 치즈", "50g", allergen="유제품",
                 alternatives=["체다 치즈", "모짜렐라 치즈"], match=("치즈",)),
            _ing("마늘", "2쪽", optional=True),
            _ing("후추", "약간", always=True),
        ],
        "steps": [
            _step("큰 냄비에 물을 끓이고 소금을 넣은 뒤 스파게티 면 200g을 넣어주세요.", 8,
                  "면은 포장지에 적힌 시간보다 1분 적게 삶아주세요."),
            _step("볼에 달걀 2개, 파르메산 치즈 50g, 후추를 넣고 잘 섞어주세요.", 2,
                  "이 소스가 까르보나라의 핵심입니다. 덩어리 없이 부드럽게 섞어주세요."),
            _step("프라이팬에 베이컨 100g과 다진 마늘을 넣고 바삭하게 볶아주세요.", 5,
                  "베이컨에서 나온 기름은 버리지 마세요. 소스에 사용됩니다."),
            _step("삶은 면을 건져서 프라이팬에 넣고 베이컨과 섞어주세요.", 1,
                  "면수를 조금 남겨두면 소스가 더 부드러워집니다."),
            _step("불을 끄고 생크림 100ml를 넣어 섞은 뒤, 달걀 소스를 부어 빠르게 섞어주세요.", 2,
                  "불을 끈 상태에서 섞어야 달걀이 익지 않고 부드러운 소스가 됩니다."),
            _step("접시에 담고 파르메산 치즈와 후추를 뿌려 완성합니다.", 1,
                  "먹기 직전에 후추를 갈아서 뿌리면 더 맛있습니다."),
        ],
        "tips": [
            "면수는 소스 농도를 맞출 때 사용합니다",
            "달걀 소스는 반드시 불을 끈 뒤에 넣어주세요",
        ],
        "nutrition": {"protein": 26, "carbs": 70, "fat": 32},
    },
    {
        "id": "3",
        "name": "된장찌개",
        "category": "한식",
        "difficulty": "초급",
        "cookingTime": 30,
        "servings": 3,
        "calories": 180,
        "description": "구수하고 건강한 한식 국물 요리",
        "image": "https://images.unsplash.com/photo-1665395876131-7cf7cb099a51?w=400&h=225&fit=crop",
        "tags": ["한식", "찌개", "전통"],
        "ingredients": [
            _ing("된장", "2큰술", allergen="콩"),
            _ing("두부", "1/2모", allergen="콩", alternatives=["없이"]),
            _ing("감자", "1개", optional=True),
            _ing("양파", "1/2개"),
            _ing("대파", "1대", optional=True, match=("대파", "파")),
            _ing("마늘", "3쪽"),
            _ing("고추", "1개", optional=True, alternatives=["청양고추"]),
        ],
        "steps": [
            _step("냄비에 물 3컵을 넣고 중불로 끓여주세요.", 2,
                  "멸치 육수를 사용하면 더 깊은 맛이 납니다."),
            _step("감자 1개와 양파 1/2개를 한입 크기로 썰어서 넣어주세요.", 3,
                  "감자가 익는데 시간이 걸리므로 먼저 넣어줍니다."),
            _step("물이 끓으면 된장 2스푼을 풀어주세요.", 5,
                  "된장은 체에 거르면서 넣으면 덩어리가 생기지 않습니다."),
            _step("두부 1/2모와 마늘을 넣고 중약불로 5분간 끓여주세요.", 5,
                  "두부는 부서지기 쉬우니 조심스럽게 넣어주세요."),
            _step("대파 1대와 고추 1개를 썰어서 넣고 2분간 더 끓여 완성합니다.", 2,
                  "대파와 고추는 마지막에 넣어야 향이 살아납니다."),
        ],
        "tips": [
            "멸치육수를 사용하면 더 깊은 맛이 납니다",
            "된장은 체에 거르면 더 부드러운 국물이 됩니다",
            "취향에 따라 청양고추를 넣으면 얼큰합니다",
        ],
        "nutrition": {"protein": 12, "carbs": 20, "fat": 8},
    },
    {
        "id": "4",
        "name": "치킨 샐러드",
        "category": "기타",
        "difficulty": "초급",
        "cookingTime": 15,
        "servings": 1,
        "calories": 280,
        "description": "신선한 채소와 닭가슴살로 만드는 건강 요리",
        "image": "https://images.unsplash.com/photo-1729719930828-6cd60cb7d10f?w=400&h=225&fit=crop",
        "tags": ["샐러드", "건강식", "다이어트"],
        "ingredients": [
            _ing("닭가슴살", "150g", alternatives=["삶은 계란", "참치 캔"], match=("닭가슴살", "닭고기")),
            _ing("양상추", "100g", alternatives=["로메인", "어떤 채소든"]),
            _ing("토마토", "1개", optional=True),
            _ing("오이", "1/2개", optional=True),
            _ing("올리브유", "2큰술", alternatives=["식용유"], match=("올리브유", "식용유")),
            _ing("레몬즙", "1큰술", alternatives=["식초"], match=("레몬",)),
        ],
        "steps": [
            _step("닭가슴살을 끓는 물에 넣고 15분간 삶아주세요.", 15,
                  "닭가슴살이 완전히 익었는지 확인하세요."),
            _step("삶은 닭가슴살을 식혀서 손으로 찢어주세요.", 3,
                  "결대로 찢으면 식감이 더 좋습니다."),
            _step("양상추, 토마토, 오이 등 채소를 씻어서 먹기 좋게 썰어주세요.", 5,
                  "채소는 찬물에 담가두면 더 아삭해집니다."),
            _step("올리브오일, 레몬즙, 소금, 후추로 드레싱을 만들어주세요.", 2,
                  "드레싱은 먹기 직전에 넣어야 채소가 눅눅해지지 않습니다."),
            _step("볼에 채소와 닭가슴살을 담고 드레싱을 뿌려 섞으면 완성입니다.", 1,
                  "아보카도나 견과류를 추가하면 더욱 영양가 있습니다."),
        ],
        "tips": [
            "닭가슴살 대신 삶은 계란을 사용해도 좋습니다",
            "견과류를 추가하면 식감이 좋아집니다",
        ],
        "nutrition": {"protein": 28, "carbs": 12, "fat": 15},
    },
    {
        "id": "5",
        "name": "오므라이스",
        "category": "양식",
        "difficulty": "중급",
        "cookingTime": 25,
        "servings": 2,
        "calories": 560,
        "description": "부드러운 계란과 볶음밥의 조화",
        "image": "https://images.unsplash.com/photo-1743148509702-2198b23ede1c?w=400&h=225&fit=crop",
        "tags": ["양식", "계란", "볶음밥"],
        "ingredients": [
            _ing("밥", "2공기", match=("쌀", "밥")),
            _ing("달걀", "3개", allergen="달걀"),
            _ing("양파", "1/2개"),
            _ing("당근", "1/4개", optional=True),
            _ing("햄", "50g", allergen="돼지고기", alternatives=["소시지", "베이컨"]),
            _ing("케첩", "3큰술"),
            _ing("식용유", "2큰술"),
        ],
        "steps": [
            _step("양파 1/2개와 당근 1/4개, 햄을 잘게 다져주세요.", 3,
                  "채소는 최대한 잘게 썰어야 밥과 잘 어울립니다."),
            _step("프라이팬에 식용유를 두르고 채소와 햄을 볶아주세요.", 3,
                  "중불에서 채소가 투명해질 때까지 볶아주세요."),
            _step("밥과 케첩을 넣고 잘 섞어가며 볶아주세요.", 4,
                  "케첩은 취향껏 조절하되, 색이 예쁘게 나도록 충분히 넣어주세요."),
            _step("달걀 3개를 풀어서 프라이팬에 얇게 부쳐주세요.", 3,
                  "약불에서 천천히 익혀야 부드러운 오믈렛이 됩니다."),
            _step("볶음밥 위에 오믈렛을 올리고 케첩으로 장식하면 완성입니다.", 1,
                  "가운데를 칼로 살짝 갈라주면 더 예쁩니다."),
        ],
        "tips": ["랩을 이용하면 볶음밥 모양을 예쁘게 잡을 수 있습니다"],
        "nutrition": {"protein": 20, "carbs": 72, "fat": 20},
    },
    {
        "id": "6",
        "name": "비빔밥",
        "category": "한식",
        "difficulty": "중급",
        "cookingTime": 25,
        "servings": 2,
        "calories": 480,
        "description": "다양한 나물이 어우러진 영양 만점 한 그릇 요리",
        "image": "https://images.unsplash.com/photo-1718777791239-c473e9ce7376?w=400&h=225&fit=crop",
        "tags": ["한식", "비빔밥", "영양식"],
        "ingredients": [
            _ing("밥", "2공기", match=("쌀", "밥")),
            _ing("시금치", "100g", alternatives=["어떤 나물이든"]),
            _ing("당근", "1/2개"),
            _ing("콩나물", "100g", allergen="콩", optional=True),
            _ing("달걀", "2개", allergen="달걀"),
            _ing("고추장", "2큰술"),
            _ing("참기름", "1큰술"),
        ],
        "steps": [
            _step("시금치, 콩나물, 당근을 각각 데쳐주세요.", 5,
                  "각 나물은 데친 후 찬물에 헹궈 물기를 꼭 짜주세요."),
            _step("데친 나물에 참기름, 다진 마늘, 소금으로 간을 해주세요.", 3,
                  "나물마다 따로 무쳐야 각각의 맛이 살아납니다."),
            _step("밥을 그릇에 담고 나물을 예쁘게 올려주세요.", 2,
                  "색깔별로 배치하면 보기에도 좋습니다."),
            _step("가운데 계란 프라이를 올려주세요.", 3,
                  "계란 노른자가 반숙이면 비빔밥과 더 잘 어울립니다."),
            _step("고추장과 참기름을 올리고 잘 비벼서 드시면 완성입니다.", 1,
                  "참기름을 한 번 더 두르면 더욱 고소합니다."),
        ],
        "tips": [
            "나물은 각각 소금과 참기름으로 간을 해두면 좋습니다",
            "취향에 따라 육회나 소고기를 추가해도 맛있습니다",
        ],
        "nutrition": {"protein": 18, "carbs": 68, "fat": 14},
    },
    {
        "id": "7",
        "name": "토마토 파스타",
        "category": "양식",
        "difficulty": "중급",
        "cookingTime": 25,
        "servings": 2,
        "calories": 520,
        "description": "신선한 토마토로 만드는 상큼한 파스타",
        "image": "https://images.unsplash.com/photo-1751151497799-8b4057a2638e?w=400&h=225&fit=crop",
        "tags": ["양식", "파스타", "토마토"],
        "ingredients": [
            _ing("스파게티 면", "200g", allergen="밀", match=("면", "스파게티", "파스타")),
            _ing("토마토", "4개", alternatives=["토마토 소스 1병"]),
            _ing("마늘", "5쪽"),
            _ing("올리브유", "3큰술", alternatives=["식용유"], match=("올리브유", "식용유")),
            _ing("양파", "1/2개"),
            _ing("바질", "약간", optional=True, alternatives=["없이"], match=()),
            _ing("소금", "약간", always=True),
        ],
        "steps": [
            _step("냄비에 물을 끓이고 소금을 넣어 면을 삶아주세요.", 8,
                  "면은 포장지 시간보다 1분 적게 삶으세요."),
            _step("토마토는 십자로 칼집을 내어 데친 후 껍질을 벗기고 잘게 다져주세요.", 5,
                  "생토마토 대신 토마토 소스를 써도 됩니다."),
            _step("프라이팬에 올리브유를 두르고 다진 마늘과 양파를 볶아주세요.", 3,
                  "마늘이 갈색으로 변하기 전에 다음 단계로 넘어가세요."),
            _step("다진 토마토를 넣고 중불에서 5분간 끓이며 소금으로 간을 맞춰주세요.", 5,
                  "생토마토를 사용한다면 으깨면서 끓여주세요."),
            _step("삶은 면을 소스에 넣고 잘 버무려주세요.", 2,
                  "면수를 조금 추가하면 소스가 면에 더 잘 스며듭니다."),
            _step("접시에 담고 바질을 올려 완성합니다.", 1,
                  "올리브오일을 한 번 더 뿌리면 더욱 풍미가 좋습니다."),
        ],
        "tips": [
            "면은 알덴테(약간 쫄깃한 상태)로 삶는 것이 좋습니다",
            "면 삶은 물을 조금 넣으면 소스가 더 잘 어울립니다",
            "파르메산 치즈를 뿌리면 더 맛있습니다",
        ],
        "nutrition": {"protein": 18, "carbs": 75, "fat": 16},
    },
    {
        "id": "8",
        "name": "새우볶음밥",
        "category": "중식",
        "difficulty": "중급",
        "cookingTime": 25,
        "servings": 2,
        "calories": 500,
        "description": "통통한 새우가 들어간 고소한 볶음밥",
        "image": "https://images.unsplash.com/photo-1747228469026-7298b12d9963?w=400&h=225&fit=crop",
        "tags": ["중식", "볶음밥", "새우"],
        "ingredients": [
            _ing("밥", "2공기", match=("쌀", "밥")),
            _ing("새우", "10마리", allergen="갑각류", alternatives=["냉동 새우"]),
            _ing("달걀", "2개", allergen="달걀"),
            _ing("당근", "1/4개", optional=True),
            _ing("완두콩", "50g", optional=True),
            _ing("간장", "2큰술", allergen="콩"),
            _ing("식용유", "2큰술"),
        ],
        "steps": [
            _step("새우의 내장을 제거하고 깨끗이 씻어주세요.", 5,
                  "새우 등쪽에 칼집을 내서 내장을 제거하세요."),
            _step("프라이팬에 기름을 두르고 새우를 볶아주세요.", 3,
                  "새우가 붉은색으로 변하면 익은 것입니다."),
            _step("다진 당근과 완두콩을 넣고 함께 볶아주세요.", 3,
                  "채소가 숨이 죽을 때까지 중불에서 볶아주세요."),
            _step("달걀을 풀어 넣고 스크램블한 뒤 밥을 넣고 간장으로 간을 하며 볶아주세요.", 4,
                  "밥알이 흩어지도록 주걱으로 눌러가며 볶으세요."),
            _step("그릇에 담고 참기름을 약간 뿌려 완성합니다.", 1,
                  "후추를 살짝 뿌리면 더욱 맛있습니다."),
        ],
        "tips": ["냉동 새우는 찬물에 해동한 뒤 물기를 충분히 빼주세요"],
        "nutrition": {"protein": 24, "carbs": 66, "fat": 14},
    },
    {
        "id": "9",
        "name": "계란볶음밥",
        "category": "중식",
        "difficulty": "초급",
        "cookingTime": 15,
        "servings": 1,
        "calories": 380,
        "description": "누구나 쉽게 만들 수 있는 간단한 요리",
        "image": "https://images.unsplash.com/photo-1642339800099-921df1a0a958?w=400&h=225&fit=crop",
        "tags": ["간편식", "볶음밥", "계란"],
        "ingredients": [
            _ing("밥", "1공기", always=True),
            _ing("달걀", "2개", allergen="달걀"),
            _ing("식용유", "2큰술"),
            _ing("소금", "약간", always=True),
            _ing("후추", "약간", always=True),
        ],
        "steps": [
            _step("달걀을 풀어 소금으로 간합니다.", 1, "달걀은 충분히 풀어야 부드럽게 익습니다."),
            _step("팬에 기름을 두르고 달걀을 부어 스크램블합니다.", 2, "달걀이 반쯤 익었을 때 밥을 넣으면 좋습니다."),
            _step("밥을 넣고 함께 볶습니다.", 3, "찬밥을 사용하면 더 잘 볶아집니다."),
            _step("소금과 후추로 간을 맞춥니다.", 1, "취향에 따라 간장을 넣어도 좋습니다."),
            _step("접시에 담아 완성합니다.", 1, "송송 썬 파를 올리면 향이 좋아집니다."),
        ],
        "tips": [
            "찬밥을 사용하면 더 잘 볶아집니다",
            "취향에 따라 간장을 넣어도 좋습니다",
        ],
        "nutrition": {"protein": 14, "carbs": 55, "fat": 12},
    },
    {
        "id": "10",
        "name": "라면 업그레이드",
        "category": "한식",
        "difficulty": "초급",
        "cookingTime": 10,
        "servings": 1,
        "calories": 420,
        "description": "간단하지만 특별한 라면 요리",
        "image": "https://images.unsplash.com/photo-1740727665746-cfe80ababc23?w=400&h=225&fit=crop",
        "tags": ["간편식", "라면"],
        "ingredients": [
            _ing("라면", "1개", allergen="밀", always=True),
            _ing("달걀", "1개", allergen="달걀"),
            _ing("대파", "약간", match=("대파", "파")),
            _ing("치즈", "1장", allergen="유제품", optional=True),
        ],
        "steps": [
            _step("냄비에 물 550ml를 끓입니다.", 3, "물의 양을 정확히 맞추면 간이 딱 맞습니다."),
            _step("라면과 스프를 넣습니다.", 2, "면을 젓가락으로 들었다 놨다 하면 더 쫄깃해집니다."),
            _step("대파를 송송 썰어 넣습니다.", 1, "파는 흰 부분을 넣으면 국물이 시원해집니다."),
            _step("달걀을 넣습니다.", 1, "달걀은 풀지 않고 넣으면 국물이 깔끔합니다."),
            _step("불을 끄고 치즈를 올려 완성합니다.", 1, "치즈를 넣으면 국물이 부드러워집니다."),
        ],
        "tips": [
            "치즈를 넣으면 국물이 부드러워집니다",
            "김치를 추가하면 더 맛있습니다",
        ],
        "nutrition": {"protein": 12, "carbs": 58, "fat": 16},
    },
    {
        "id": "11",
        "name": "크림 파스타",
        "category": "양식",
        "difficulty": "중급",
        "cookingTime": 20,
        "servings": 2,
        "calories": 650,
        "description": "부드럽고 고소한 크림 파스타",
        "image": "https://images.unsplash.com/photo-1760390952135-12da7267ff8f?w=400&h=225&fit=crop",
        "tags": ["양식", "파스타", "크림"],
        "ingredients": [
            _ing("스파게티 면", "200g", allergen="밀", match=("면", "스파게티", "파스타")),
            _ing("생크림", "200ml", allergen="유제품", alternatives=["우유"], match=("우유", "생크림")),
            _ing("마늘", "3쪽"),
            _ing("양파", "1/2개"),
            _ing("버터", "30g", allergen="유제품"),
            _ing("파르메산 치즈", "50g", allergen="유제품", match=("치즈",)),
        ],
        "steps": [
            _step("면을 삶아줍니다.", 8, "면은 포장지 시간보다 1분 적게 삶으세요."),
            _step("팬에 버터를 녹이고 마늘과 양파를 볶습니다.", 3, "버터가 타지 않도록 약불에서 녹여주세요."),
            _step("생크림을 넣고 끓입니다.", 3, "생크림은 센불에서 끓이면 분리될 수 있습니다."),
            _step("파르메산 치즈를 넣고 녹입니다.", 1, "치즈는 조금씩 나눠 넣어야 뭉치지 않습니다."),
            _step("삶은 면을 넣고 버무립니다.", 2, "면수를 조금 넣으면 농도를 맞추기 쉽습니다."),
            _step("후추를 뿌려 완성합니다.", 1, "통후추를 갈아 뿌리면 향이 좋습니다."),
        ],
        "tips": [
            "생크림 대신 우유를 사용할 수 있지만 농도가 묽습니다",
            "베이컨이나 버섯을 추가하면 더 맛있습니다",
        ],
        "nutrition": {"protein": 22, "carbs": 72, "fat": 28},
    },
    {
        "id": "12",
        "name": "연어초밥",
        "category": "일식",
        "difficulty": "고급",
        "cookingTime": 40,
        "servings": 2,
        "calories": 420,
        "description": "신선한 연어로 만드는 정통 일본 초밥",
        "image": "https://images.unsplash.com/photo-1579584425555-c3ce17fd4351?w=400&h=225&fit=crop",
        "tags": ["일식", "초밥", "연어"],
        "ingredients": [
            _ing("밥", "2공기", match=("쌀", "밥")),
            _ing("연어", "200g", allergen="생선", alternatives=["참치회"]),
            _ing("식초", "3큰술"),
            _ing("설탕", "1큰술"),
            _ing("소금", "1작은술", always=True),
            _ing("와사비", "약간", optional=True, match=()),
        ],
        "steps": [
            _step("식초, 설탕, 소금을 섞어 단촛물을 만들어주세요.", 2, "설탕이 완전히 녹을 때까지 저어주세요."),
            _step("따뜻한 밥에 단촛물을 넣고 자르듯이 섞어 식혀주세요.", 10, "부채질을 하면서 섞으면 밥알에 윤기가 납니다."),
            _step("연어를 결 반대 방향으로 얇게 썰어주세요.", 10, "칼을 한 방향으로 당기듯 썰어야 단면이 깔끔합니다."),
            _step("밥을 한입 크기로 쥐어 모양을 잡아주세요.", 10, "손에 물을 살짝 묻히면 밥이 달라붙지 않습니다."),
            _step("밥 위에 와사비를 조금 바르고 연어를 올려 완성합니다.", 5, "간장은 밥이 아닌 연어 쪽에 찍어 드세요."),
        ],
        "tips": ["연어는 반드시 횟감용을 사용하세요"],
        "nutrition": {"protein": 24, "carbs": 58, "fat": 10},
    },
    {
        "id": "13",
        "name": "규동",
        "category": "일식",
        "difficulty": "중급",
        "cookingTime": 30,
        "servings": 2,
        "calories": 610,
        "description": "달콤짭짤한 소고기 덮밥",
        "image": "https://images.unsplash.com/photo-1582878826629-29b7ad1cdc43?w=400&h=225&fit=crop",
        "tags": ["일식", "덮밥", "소고기"],
        "ingredients": [
            _ing("밥", "2공기", match=("쌀", "밥")),
            _ing("소고기", "200g", alternatives=["돼지고기"]),
            _ing("양파", "1개"),
            _ing("간장", "3큰술", allergen="콩"),
            _ing("설탕", "1큰술"),
            _ing("맛술", "2큰술", optional=True, alternatives=["청주"]),
        ],
        "steps": [
            _step("양파를 채 썰고 소고기는 먹기 좋은 크기로 썰어주세요.", 5, "소고기는 얇게 썬 불고기용이 좋습니다."),
            _step("냄비에 물 1/2컵, 간장, 설탕, 맛술을 넣고 끓여주세요.", 3, "양념이 끓어오르면 불을 중불로 줄이세요."),
            _step("양파를 넣고 숨이 죽을 때까지 익혀주세요.", 5, "양파가 투명해지면 단맛이 올라옵니다."),
            _step("소고기를 넣고 양념이 배도록 졸여주세요.", 5, "고기를 너무 오래 끓이면 질겨집니다."),
            _step("밥 위에 고기와 양파를 국물과 함께 올려 완성합니다.", 1, "날달걀 노른자를 올리면 더 부드럽습니다."),
        ],
        "tips": ["생강을 조금 넣으면 고기 잡내가 사라집니다"],
        "nutrition": {"protein": 28, "carbs": 80, "fat": 18},
    },
    {
        "id": "14",
        "name": "마파두부",
        "category": "중식",
        "difficulty": "중급",
        "cookingTime": 30,
        "servings": 2,
        "calories": 390,
        "description": "얼얼한 맛이 일품인 사천식 두부 요리",
        "image": "https://images.unsplash.com/photo-1672732608910-ffe083446f9f?w=400&h=225&fit=crop",
        "tags": ["중식", "두부", "매운맛"],
        "ingredients": [
            _ing("두부", "1모", allergen="콩"),
            _ing("다진 돼지고기", "150g", allergen="돼지고기", alternatives=["다진 소고기"], match=("돼지고기",)),
            _ing("대파", "1대", match=("대파", "파")),
            _ing("마늘", "3쪽"),
            _ing("고추장", "1큰술", alternatives=["두반장"]),
            _ing("전분", "1큰술", optional=True, alternatives=["감자전분"]),
        ],
        "steps": [
            _step("두부를 깍둑썰기해서 끓는 물에 살짝 데쳐주세요.", 3, "데치면 두부가 잘 부서지지 않습니다."),
            _step("팬에 기름을 두르고 다진 마늘과 대파를 볶아 향을 내주세요.", 2, "파기름이 나면 다음 단계로 넘어가세요."),
            _step("다진 돼지고기를 넣고 볶다가 고추장을 넣어주세요.", 4, "고기가 완전히 익은 뒤 양념을 넣으세요."),
            _step("물 1컵과 두부를 넣고 5분간 끓여주세요.", 5, "두부는 주걱으로 밀듯이 저어야 부서지지 않습니다."),
            _step("전분물을 넣어 농도를 맞추면 완성입니다.", 1, "전분물은 조금씩 넣어가며 농도를 보세요."),
        ],
        "tips": ["산초가루를 뿌리면 얼얼한 맛이 살아납니다"],
        "nutrition": {"protein": 22, "carbs": 14, "fat": 24},
    },
]

_RECIPES_BY_ID = {recipe["id"]: recipe for recipe in RECIPES}


def get_recipe(recipe_id: str) -> Optional[dict[str, Any]]:
    return _RECIPES_BY_ID.get(str(recipe_id))


def find_recipe_by_name(text: str) -> Optional[dict[str, Any]]:
    """문장 안에 레시피 이름이 들어 있으면 해당 레시피 (긴 이름 우선)"""
    normalized = text.replace(" ", "")
    for recipe in sorted(RECIPES, key=lambda r: len(r["name"]), reverse=True):
        if recipe["name"].replace(" ", "") in normalized:
            return recipe
    return None


def list_recipes(category: Optional[str] = None) -> list[dict[str, Any]]:
    """카테고리별 레시피 목록 ('전체' 또는 None이면 전부)"""
    if not category or category == ALL_CATEGORY:
        return list(RECIPES)
    return [recipe for recipe in RECIPES if recipe["category"] == category]


def recipe_summary(recipe: dict[str, Any]) -> dict[str, Any]:
    """목록 화면용 요약 정보"""
    return {
        key: recipe[key]
        for key in (
            "id", "name", "category", "difficulty", "cookingTime",
            "servings", "calories", "description", "image", "tags",
        )
    }


def public_ingredient(ingredient: dict[str, Any]) -> dict[str, Any]:
    """응답용 재료 (내부 매칭 키 제외)"""
    return {k: v for k, v in ingredient.items() if k not in ("match", "always")}


def recipe_detail(recipe: dict[str, Any]) -> dict[str, Any]:
    """상세 화면용 전체 정보"""
    return {
        **recipe,
        "ingredients": [public_ingredient(ing) for ing in recipe["ingredients"]],
        "steps": [dict(step) for step in recipe["steps"]],
    }

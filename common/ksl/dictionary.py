import json
from typing import Dict, Mapping, Optional

from .config import get_logger

logger = get_logger("KSLDictionary")


# ================================================================================
# 기본 수어 어휘
# ================================================================================
# key: 한국어 단어 (기본형 + 자주 쓰이는 활용형), value: KSL 글로스
# 활용형은 형태소 분석 없이 바로 찾을 수 있도록 함께 등록

BASE_VOCABULARY: Dict[str, str] = {
    # ── 인사말 ──
    "안녕": "안녕",
    "안녕하세요": "안녕",
    "반갑다": "반갑다",
    "반갑습니다": "반갑다",
    "반가워요": "반갑다",
    "감사": "감사",
    "감사합니다": "감사",
    "고맙습니다": "감사",
    "미안": "미안",
    "미안합니다": "미안",
    "죄송합니다": "미안",
    "괜찮다": "괜찮다",
    "괜찮습니다": "괜찮다",
    "축하": "축하",
    "수고": "수고",
    "네": "네",
    "아니요": "아니다",

    # ── 대명사 ──
    "나": "나",
    "저": "나",
    "너": "너",
    "우리": "우리",
    "저희": "우리",
    "누구": "누구",
    "무엇": "무엇",
    "뭐": "무엇",
    "어디": "어디",
    "언제": "언제",
    "왜": "왜",

    # ── 기본 동사 ──
    "먹다": "먹다",
    "먹어요": "먹다",
    "먹습니다": "먹다",
    "먹었어요": "먹다",
    "마시다": "마시다",
    "마셔요": "마시다",
    "가다": "가다",
    "가요": "가다",
    "갑니다": "가다",
    "오다": "오다",
    "와요": "오다",
    "옵니다": "오다",
    "보다": "보다",
    "봐요": "보다",
    "자다": "자다",
    "자요": "자다",
    "하다": "하다",
    "해요": "하다",
    "합니다": "하다",
    "있다": "있다",
    "없다": "없다",
    "알다": "알다",
    "모르다": "모르다",
    "만나다": "만나다",
    "기다리다": "기다리다",
    "말하다": "말하다",
    "배우다": "배우다",
    "공부하다": "공부하다",
    "일하다": "일하다",
    "쉬다": "쉬다",
    "걷다": "걷다",
    "듣다": "듣다",
    "돕다": "돕다",
    "도와주다": "돕다",
    "이해하다": "이해하다",
    "원하다": "원하다",
    "사랑하다": "사랑하다",

    # ── 방향동사 ──
    "주다": "주다",
    "받다": "받다",
    "보내다": "보내다",
    "가져오다": "가져오다",
    "가져가다": "가져가다",
    "들어가다": "들어가다",
    "나가다": "나가다",
    "들어오다": "들어오다",
    "나오다": "나오다",
    "도착하다": "도착",
    "출발하다": "출발",

    # ── 기본 명사 ──
    "밥": "밥",
    "식사": "밥",
    "물": "물",
    "커피": "커피",
    "사람": "사람",
    "친구": "친구",
    "가족": "가족",
    "엄마": "엄마",
    "아빠": "아빠",
    "선생님": "선생님",
    "학생": "학생",
    "이름": "이름",
    "시간": "시간",
    "도움": "도움",

    # ── 장소 ──
    "집": "집",
    "학교": "학교",
    "회사": "회사",
    "병원": "병원",
    "식당": "식당",
    "도서관": "도서관",
    "마트": "마트",
    "은행": "은행",
    "공원": "공원",
    "화장실": "화장실",

    # ── 시간 ──
    "지금": "지금",
    "오늘": "오늘",
    "내일": "내일",
    "어제": "어제",
    "아침": "아침",
    "점심": "점심",
    "저녁": "저녁",
    "주말": "주말",

    # ── 형용사 ──
    "좋다": "좋다",
    "좋아요": "좋다",
    "나쁘다": "나쁘다",
    "예쁘다": "예쁘다",
    "아프다": "아프다",
    "바쁘다": "바쁘다",
    "쉽다": "쉽다",
    "어렵다": "어렵다",
    "춥다": "춥다",
    "덥다": "덥다",
    "맛있다": "맛있다",
    "따뜻하다": "따뜻하다",
    "시원하다": "시원하다",
    "아름답다": "아름답다",
}


class KSLDictionary:
    """
    한국어 → KSL 글로스 사전

    인스턴스마다 기본 어휘의 복사본을 가지므로
    add()로 추가한 단어는 다른 인스턴스에 영향을 주지 않음.
    add()는 동기화되지 않으므로 여러 스레드에서 수정할 때는 호출자가 직렬화해야 함.
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._entries: Dict[str, str] = dict(BASE_VOCABULARY if entries is None else entries)

    def lookup(self, word: str) -> Optional[str]:
        """글로스 조회 (없으면 None)"""
        return self._entries.get(word)

    def add(self, word: str, gloss: str) -> None:
        """
        단어 추가 또는 덮어쓰기

        어휘는 원래 불완전하므로 검증하지 않음
        """
        self._entries[word] = gloss

    def update(self, entries: Mapping[str, str]) -> None:
        """여러 단어 일괄 추가"""
        for word, gloss in entries.items():
            self.add(word, gloss)

    def load_json(self, path: str) -> int:
        """
        JSON 오버레이 사전 로드

        파일 형식: {"한국어": "글로스", ...}

        Returns:
            추가된 항목 수
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"오버레이 사전은 JSON 객체여야 합니다: {path}")

        self.update(data)
        logger.info(f"오버레이 사전 로드: {path} ({len(data)}개)")
        return len(data)

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries


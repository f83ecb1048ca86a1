import re
from enum import Enum
from typing import Dict, List, Sequence

from .config import (
    DIR_FIRST_TO_THIRD,
    DIR_TAG_MARKER,
    DIR_THIRD_TO_FIRST,
    get_logger,
)

logger = get_logger("KSLRules")


# ================================================================================
# 문장 유형
# ================================================================================

class SentenceType(str, Enum):
    """
    문장 유형 분류

    비수지 신호(NMM) 선택에 사용
    """
    QUESTION = "question"          # 의문문
    NEGATIVE = "negative"          # 부정문
    IMPERATIVE = "imperative"      # 명령문
    EXCLAMATORY = "exclamatory"    # 감탄문
    DECLARATIVE = "declarative"    # 평서문


# 문장 유형 → 비수지 태그 (NMM: Non-Manual Markers)
NMM_TAGS: Dict[SentenceType, str] = {
    SentenceType.QUESTION: "{NMM:WH?}",
    SentenceType.NEGATIVE: "{NMM:neg}",
    SentenceType.IMPERATIVE: "{NMM:imp}",
    SentenceType.EXCLAMATORY: "{NMM:excl}",
    SentenceType.DECLARATIVE: "{NMM:neutral}",
}


# ================================================================================
# KSL 변환 규칙 엔진
# ================================================================================

class KSLRuleEngine:
    """
    KSL 문법 규칙

    [규칙]
    1. 시간/장소 전면화: 시간 + 장소 + 나머지 (KSL 화제 어순)
    2. 방향동사 태그: 가다 → '가다 {dir:1→3}'
    3. 문장 유형 판별: 의문 → 부정 → 명령 → 감탄 → 평서
    4. 비수지 신호 + 방향 태그 생성

    시간/장소, 방향동사 판별은 부분 문자열 포함으로 확인하므로
    짧은 단어에서 오탐이 생길 수 있음 (예: '나' ⊂ '나중에').
    """

    # ============================================================
    # - 시간/장소 표현
    # ============================================================

    TIME_WORDS: List[str] = [
        "오늘", "내일", "어제", "지금", "나중에", "아침", "점심", "저녁",
        "언제", "언제부터", "언제까지", "그때", "이제", "나중", "오전", "오후",
        "새벽", "밤", "주말", "평일", "월요일", "화요일", "수요일", "목요일", "금요일",
        "토요일", "일요일", "월", "년", "시간", "분", "초",
    ]

    PLACE_WORDS: List[str] = [
        "학교", "집", "병원", "식당", "회사", "가게", "은행", "역", "공원",
        "도서관", "극장", "카페", "마트", "살롱", "지하철", "버스정류장",
        "공항", "항구", "호텔", "모텔", "운동장", "수영장", "놀이터",
        "산", "바다", "강", "호수", "섬", "동네", "골목", "길가",
    ]

    # ============================================================
    # - 방향동사
    # ============================================================
    # 1→3: 화자에서 제3자로, 3→1: 제3자에서 화자로

    DIRECTIONAL_MAPPINGS: Dict[str, str] = {
        # ── 기본 방향동사 ──
        "가다": DIR_FIRST_TO_THIRD,
        "오다": DIR_THIRD_TO_FIRST,
        "주다": DIR_FIRST_TO_THIRD,
        "받다": DIR_THIRD_TO_FIRST,
        "보내다": DIR_FIRST_TO_THIRD,
        # ── 복합 이동동사 ──
        "가져오다": DIR_THIRD_TO_FIRST,
        "가져가다": DIR_FIRST_TO_THIRD,
        "들어가다": DIR_FIRST_TO_THIRD,
        "나가다": DIR_FIRST_TO_THIRD,
        "들어오다": DIR_THIRD_TO_FIRST,
        "나오다": DIR_THIRD_TO_FIRST,
        "올라가다": DIR_FIRST_TO_THIRD,
        "내려가다": DIR_FIRST_TO_THIRD,
        "올라오다": DIR_THIRD_TO_FIRST,
        "내려오다": DIR_THIRD_TO_FIRST,
    }

    # 원문에서 방향을 추정할 때 쓰는 표면형
    OUTWARD_SURFACE_FORMS = ("가다", "가요", "가세요")
    INWARD_SURFACE_FORMS = ("오다", "와요", "오세요")

    # ============================================================
    # - 문장 유형 패턴 (그룹 순서대로 확인)
    # ============================================================

    QUESTION_PATTERNS = [
        re.compile(r"\?"),                                  # 물음표
        re.compile(r"니까$"), re.compile(r"나요$"), re.compile(r"까요$"),  # 의문 어미
        re.compile(r"어디|언제|무엇|누구|왜|어떻게|뭐"),           # 의문사
    ]

    NEGATIVE_PATTERNS = [
        re.compile(r"\b안\b"), re.compile(r"\b못\b"), re.compile(r"\b없\b"),  # 부정 부사
        re.compile(r"아니"), re.compile(r"싫"),
        re.compile(r"싶지\s*않"), re.compile(r"말지\s*말"),
    ]

    IMPERATIVE_PATTERNS = [
        re.compile(r"(?<!안녕하)세요$"),    # 인사말 '안녕하세요'는 명령이 아님
        re.compile(r"어라$"), re.compile(r"아라$"), re.compile(r"가라$"),
        re.compile(r"오라$"), re.compile(r"해라$"),
        re.compile(r"하지\s*마"), re.compile(r"하지\s*마라"),
    ]

    EXCLAMATORY_PATTERNS = [
        re.compile(r"!"),
        re.compile(r"아!"), re.compile(r"오!"), re.compile(r"와!"),
        re.compile(r"어머!"), re.compile(r"세상에!"),
    ]

    # 단음절 조사 (remove_particles용)
    SINGLE_PARTICLES = re.compile(r"[은는이가을를에의로]")

    # ================================================================
    # - 시간/장소 전면화
    # ================================================================

    def move_time_place(self, words: Sequence[str]) -> List[str]:
        """
        시간/장소 표현을 문장 앞으로 이동

        각 그룹 안의 상대 순서는 유지
        예: ['친구', '학교', '오늘', '먹다'] → ['오늘', '학교', '친구', '먹다']
        """
        time_found = []
        place_found = []
        other_words = []

        for word in words:
            if self._matches_any(word, self.TIME_WORDS):
                time_found.append(word)
            elif self._matches_any(word, self.PLACE_WORDS):
                place_found.append(word)
            else:
                other_words.append(word)

        return time_found + place_found + other_words

    @staticmethod
    def _matches_any(word: str, candidates: Sequence[str]) -> bool:
        # 활용/합성 형태까지 잡기 위해 양방향 포함 관계로 확인
        return any(word == c or c in word or word in c for c in candidates)

    # ================================================================
    # - 방향동사 태그
    # ================================================================

    def add_directional_tags(self, words: Sequence[str]) -> List[str]:
        """
        방향동사 뒤에 방향 태그 추가

        정확히 일치하는 동사를 먼저 찾고, 없으면 부분 일치로 확인.
        단어 하나에 태그는 최대 하나.
        """
        tagged = []

        for word in words:
            tag = self.DIRECTIONAL_MAPPINGS.get(word)

            if tag is None:
                # 부분 매칭 (합성어 처리)
                for verb, verb_tag in self.DIRECTIONAL_MAPPINGS.items():
                    if verb in word:
                        tag = verb_tag
                        break

            tagged.append(f"{word} {tag}" if tag else word)

        return tagged

    # ================================================================
    # - 문장 유형 판별
    # ================================================================

    def get_sentence_type(self, text: str) -> SentenceType:
        """
        원문(토큰화 전)으로 문장 유형 판별

        의문 → 부정 → 명령 → 감탄 순서로 먼저 매칭된 유형, 없으면 평서문
        """
        pattern_groups = (
            (SentenceType.QUESTION, self.QUESTION_PATTERNS),
            (SentenceType.NEGATIVE, self.NEGATIVE_PATTERNS),
            (SentenceType.IMPERATIVE, self.IMPERATIVE_PATTERNS),
            (SentenceType.EXCLAMATORY, self.EXCLAMATORY_PATTERNS),
        )

        for sentence_type, patterns in pattern_groups:
            if any(pattern.search(text) for pattern in patterns):
                return sentence_type

        return SentenceType.DECLARATIVE

    # ================================================================
    # - 수어 태그 생성
    # ================================================================

    def get_sign_language_tags(self, sentence_type: SentenceType, text: str,
                               words: Sequence[str]) -> str:
        """
        비수지 태그 + 방향 태그 생성

        글로스에 방향 태그가 없을 때만 원문에서 이동 동사를 찾아 방향 태그 추가
        """
        tags = [NMM_TAGS.get(sentence_type, NMM_TAGS[SentenceType.DECLARATIVE])]

        has_directional_tag = any(DIR_TAG_MARKER in word for word in words)
        if not has_directional_tag:
            if any(form in text for form in self.OUTWARD_SURFACE_FORMS):
                tags.append(DIR_FIRST_TO_THIRD)
            elif any(form in text for form in self.INWARD_SURFACE_FORMS):
                tags.append(DIR_THIRD_TO_FIRST)

        return " ".join(tags)

    # ================================================================
    # - 보조 기능
    # ================================================================

    def remove_particles(self, word: str) -> str:
        """단음절 조사 전부 제거 (단어 내부 포함)"""
        return self.SINGLE_PARTICLES.sub("", word)

    def analyze_sentence(self, text: str) -> Dict[str, str]:
        """
        문장 유형과 태그만 빠르게 확인

        Returns:
            {"type": 문장 유형, "tags": 태그 문자열}
        """
        sentence_type = self.get_sentence_type(text)
        tags = self.get_sign_language_tags(sentence_type, text, text.split())
        logger.debug(f"문장 분석: '{text}' → {sentence_type.value} {tags}")
        return {"type": sentence_type.value, "tags": tags}

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .config import get_logger

logger = get_logger("MorphemeAnalyzer")


# ================================================================================
# 분석 결과 데이터 타입
# ================================================================================

@dataclass(frozen=True)
class MorphemeAnalysis:
    """
    형태소 분석 결과

    Attributes:
        stem: 사전 조회용 어간 (기본형)
        suffix: 제거된 어미/조사
        type: 분석 유형 (honorific_mapping, irregular, 패턴 유형, particle, simple, none)
        original: 입력 단어
        category: 패턴 그룹 (present, past, future, intention, ability)
    """
    stem: str                           # 어간
    suffix: str                         # 어미
    type: str                           # 분석 유형
    original: str                       # 원본 단어
    category: Optional[str] = None      # 패턴 그룹 (패턴 매칭일 때만)

    @property
    def succeeded(self) -> bool:
        """어미를 실제로 분리했는지 여부"""
        return self.type != "none" and self.stem != self.original


@dataclass(frozen=True)
class SuffixRule:
    """
    어미 패턴 규칙

    pattern의 첫 번째 그룹이 어간, 두 번째 그룹(있다면)이 어미
    stem_builder가 없으면 어간 + '다'로 기본형 생성
    """
    pattern: re.Pattern
    type: str
    stem_builder: Optional[Callable[[re.Match], str]] = None

    def build_stem(self, match: re.Match) -> str:
        if self.stem_builder is not None:
            return self.stem_builder(match)
        return match.group(1) + "다"


def _suffix(ending: str, rule_type: str,
            stem_builder: Optional[Callable[[re.Match], str]] = None) -> SuffixRule:
    return SuffixRule(re.compile(rf"([가-힣]+)({ending})$"), rule_type, stem_builder)


def _want_stem(match: re.Match) -> str:
    # '먹고 싶어요' → '먹다'
    return match.group(1) + "다"


# ================================================================================
# 형태소 분석기
# ================================================================================

class MorphemeAnalyzer:
    """
    한국어 단어의 어미를 분리하여 사전 조회용 기본형을 복원

    [분석 순서] 먼저 매칭된 규칙이 결과를 결정 (규칙 조합 없음)
    1. 높임 표현 매핑 (완전 일치)
    2. 불규칙 활용 매핑 (완전 일치)
    3. 어미 패턴 (현재 → 과거 → 미래 → 의향 → 능력)
    4. 조사 제거
    5. 격식체 어미 제거 (입니다/니다)
    6. 분석 실패 → 원본 그대로

    높임/불규칙 형태는 일반 어미 패턴이 잘못 분리하므로 먼저 확인하고,
    조사는 이미 활용된 서술어 뒤에도 붙을 수 있어 마지막에 확인함.

    >>> analyzer = MorphemeAnalyzer()
    >>> analyzer.analyze("먹어요").stem
    '먹다'
    """

    # ============================================================
    # - 높임 표현 매핑
    # ============================================================
    # 높임 동사 → 평어 기본형

    HONORIFIC_MAPPINGS: Dict[str, str] = {
        "드시다": "먹다",
        "드세요": "먹다",
        "드실래요": "먹다",
        "계시다": "있다",
        "계세요": "있다",
        "주무시다": "자다",
        "주무세요": "자다",
        "말씀하시다": "말하다",
        "말씀해주세요": "말하다",
    }

    # ============================================================
    # - 불규칙 활용 매핑
    # ============================================================
    # 규칙적인 어미 분리로 복원할 수 없는 활용형 → 기본형

    IRREGULAR_CONJUGATIONS: Dict[str, str] = {
        # ── ㅡ 탈락 (아프다 → 아파요) ──
        "아파요": "아프다",
        "아프다": "아프다",
        "예뻐요": "예쁘다",
        "바빠요": "바쁘다",
        "나빠요": "나쁘다",
        # ── ㅂ 불규칙 ──
        "아름다워요": "아름답다",
        "쉬워요": "쉽다",
        "어려워요": "어렵다",
        "추워요": "춥다",
        "더워요": "덥다",
        # ── ㄷ 불규칙 ──
        "걸어요": "걷다",
        "들어요": "듣다",
        # ── 자주 쓰이는 활용 ──
        "좋네요": "좋다",
        "나쁘네요": "나쁘다",
        "따뜻해요": "따뜻하다",
        "시원해요": "시원하다",
        "맛있어요": "맛있다",
        "맛있습니다": "맛있다",
        # ── 과거형 ──
        "이해했습니다": "이해하다",
        "이해했어요": "이해하다",
        "도와줬습니다": "도와주다",
        "도와줬어요": "도와주다",
        # ── 의향형 ──
        "싶어요": "원하다",
        "배우고싶어요": "배우다+원하다",
        "가고싶어요": "가다+원하다",
        "먹고싶어요": "먹다+원하다",
    }

    # ============================================================
    # - 어미 패턴 (그룹 순서대로 확인)
    # ============================================================

    SUFFIX_PATTERNS: Tuple[Tuple[str, Tuple[SuffixRule, ...]], ...] = (
        # 현재형
        ("present", (
            _suffix("습니다|ㅂ니다", "formal"),
            _suffix("어요|아요|여요|해요", "polite"),
            _suffix("어|아|여|해", "casual"),
            _suffix("세요|으세요", "honorific"),
            _suffix("네요|구나|군요", "exclamatory"),
            _suffix("요", "polite_ending"),
        )),
        # 과거형
        ("past", (
            _suffix("었습니다|았습니다|였습니다|했습니다", "past_formal"),
            _suffix("었어요|았어요|였어요|했어요", "past_polite"),
            _suffix("었다|았다|였다|했다", "past_casual"),
            _suffix("었네요|았네요|였네요|했네요", "past_exclamatory"),
        )),
        # 미래/의지형
        ("future", (
            _suffix("을게요|ㄹ게요", "will"),
            _suffix("겠어요|겠습니다", "will_formal"),
            _suffix("ㄹ래요|을래요", "want_to"),
        )),
        # 의향/희망형
        ("intention", (
            _suffix(r"고\s*싶어요", "want", _want_stem),
            _suffix(r"고\s*싶습니다", "want_formal", _want_stem),
            _suffix(r"고\s*싶다", "want_casual", _want_stem),
        )),
        # 능력/가능성
        ("ability", (
            _suffix(r"ㄹ\s*수\s*있어요|을\s*수\s*있어요", "can"),
            _suffix(r"ㄹ\s*수\s*있습니다|을\s*수\s*있습니다", "can_formal"),
            _suffix(r"야\s*해요|야\s*합니다", "must"),
        )),
    )

    # 격조사/보조사/연결 표현
    PARTICLE_PATTERN = re.compile(
        r"([가-힣]+)([은는이가을를에의로와과부터까지도만]|에서|으로|로서|와서|해서|라서)$"
    )

    # 격식체 어미
    FORMAL_ENDING_PATTERN = re.compile(r"입니다|니다$")

    def __init__(self):
        # 우선순위 순서대로 적용할 규칙 목록
        self.rules: List[Callable[[str], Optional[MorphemeAnalysis]]] = [
            self._match_honorific,
            self._match_irregular,
            self._match_suffix_patterns,
            self._match_particle,
            self._match_formal_ending,
        ]

    def analyze(self, word: str) -> MorphemeAnalysis:
        """
        단어 형태소 분석

        Args:
            word: 공백/문장부호가 제거된 단일 단어

        Returns:
            MorphemeAnalysis: 첫 번째로 매칭된 규칙의 결과 (없으면 type='none')
        """
        for rule in self.rules:
            result = rule(word)
            if result is not None:
                logger.debug(f"형태소 분석: {word} → {result.stem} ({result.type})")
                return result

        return MorphemeAnalysis(stem=word, suffix="", type="none", original=word)

    # ================================================================
    # - 개별 규칙
    # ================================================================

    def _match_honorific(self, word: str) -> Optional[MorphemeAnalysis]:
        """높임 표현 → 평어 기본형"""
        stem = self.HONORIFIC_MAPPINGS.get(word)
        if stem is None:
            return None
        return MorphemeAnalysis(stem=stem, suffix="", type="honorific_mapping", original=word)

    def _match_irregular(self, word: str) -> Optional[MorphemeAnalysis]:
        """
        불규칙 활용 → 기본형

        어미는 표면형에서 맨 어간(기본형 - '다')을 뺀 나머지
        예: 맛있어요 → 맛있다 (어미: 어요)
        """
        stem = self.IRREGULAR_CONJUGATIONS.get(word)
        if stem is None:
            return None

        bare_stem = stem[:-1] if stem.endswith("다") else stem
        suffix = word.replace(bare_stem, "", 1) if bare_stem else word
        return MorphemeAnalysis(stem=stem, suffix=suffix, type="irregular", original=word)

    def _match_suffix_patterns(self, word: str) -> Optional[MorphemeAnalysis]:
        """어미 패턴 그룹을 순서대로 확인"""
        for category, rules in self.SUFFIX_PATTERNS:
            for rule in rules:
                match = rule.pattern.search(word)
                if match and match.group(1):
                    return MorphemeAnalysis(
                        stem=rule.build_stem(match),
                        suffix=match.group(2),
                        type=rule.type,
                        original=word,
                        category=category,
                    )
        return None

    def _match_particle(self, word: str) -> Optional[MorphemeAnalysis]:
        """조사 제거 (학교에 → 학교)"""
        match = self.PARTICLE_PATTERN.search(word)
        if match and match.group(1):
            return MorphemeAnalysis(
                stem=match.group(1),
                suffix=match.group(2),
                type="particle",
                original=word,
            )
        return None

    def _match_formal_ending(self, word: str) -> Optional[MorphemeAnalysis]:
        """격식체 어미 제거 (학생입니다 → 학생)"""
        clean = self.FORMAL_ENDING_PATTERN.sub("", word)
        if clean == word or not clean:
            return None
        return MorphemeAnalysis(
            stem=clean,
            suffix=word.replace(clean, "", 1),
            type="simple",
            original=word,
        )

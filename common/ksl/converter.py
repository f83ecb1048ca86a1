import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from .confidence import ConfidenceBreakdown, ConfidenceScorer
from .config import LOW_CONFIDENCE, NEUTRAL_TAG, VERY_LOW_CONFIDENCE, get_logger
from .dictionary import KSLDictionary
from .morphology import MorphemeAnalysis, MorphemeAnalyzer
from .rules import KSLRuleEngine

logger = get_logger("KSLConverter")


# ================================================================================
# 결과 데이터 타입
# ================================================================================

class OutputTier(Enum):
    """
    신뢰도 구간별 출력 전략
    """
    VERY_LOW = "very_low"   # < 0.3: 원문 유지 + 변환 시도 표시
    LOW = "low"             # 0.3 ~ 0.5: 하이브리드 (사전 단어만 치환)
    NORMAL = "normal"       # >= 0.5: 규칙 적용 글로스 그대로


@dataclass(frozen=True)
class ConversionResult:
    """
    변환 결과

    Attributes:
        original: 입력 원문
        gloss: KSL 글로스
        tags: 비수지/방향 태그 (공백 구분)
        confidence: 신뢰도 [0, 1]
        tier: 선택된 출력 전략 (처리 실패 시 None)
        is_degraded: 처리 실패로 원문을 그대로 돌려준 결과인지 여부
    """
    original: str
    gloss: str
    tags: str
    confidence: float
    tier: Optional[OutputTier] = None
    is_degraded: bool = False

    @property
    def tier_label(self) -> str:
        """로그/출력용 전략 이름 (처리 실패 시 'degraded')"""
        return self.tier.value if self.tier is not None else "degraded"

    def to_dict(self) -> Dict[str, Union[str, float]]:
        """저장/표시용 딕셔너리"""
        return {
            "original": self.original,
            "gloss": self.gloss,
            "tags": self.tags,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class WordMapping:
    """
    단어별 변환 내역

    Attributes:
        original: 원본 단어
        ksl: 매핑된 글로스 (실패 시 원본)
        in_dictionary: 사전(직접 또는 어간)에서 찾았는지 여부
        analysis: 형태소 분석 결과
    """
    original: str
    ksl: str
    in_dictionary: bool
    analysis: MorphemeAnalysis


# ================================================================================
# KSL 변환기
# ================================================================================

class KSLConverter:
    """
    한국어 문장 → KSL 글로스 변환기

    [처리 파이프라인]
    1. 정규화: 문장부호 제거, 공백 정리
    2. 토큰화: 공백 기준 분리
    3. 사전 매핑: 사전 → 형태소 분석 어간 → 원본
    4. 규칙 적용: 시간/장소 전면화, 방향동사 태그
    5. 태그 생성: 문장 유형 비수지 태그 + 방향 태그
    6. 신뢰도 계산 후 구간별 출력 전략 선택

    convert()는 예외를 밖으로 던지지 않고 항상 결과(또는 빈 입력이면 None)를 반환함.

    사용 예시:
        >>> converter = KSLConverter()
        >>> converter.convert("안녕하세요").gloss
        '안녕'
    """

    # 정규화 시 제거할 문장부호
    PUNCTUATION = re.compile(r"[.,!?;:'\"]")

    # 처리 중 발생 가능한 오류 (입력 형태/패턴 문제)
    PROCESSING_ERRORS = (re.error, ValueError, TypeError, KeyError, IndexError)

    def __init__(self, dictionary: Optional[KSLDictionary] = None):
        """
        초기화

        Args:
            dictionary: 사용할 사전 (없으면 기본 어휘로 새로 생성)
        """
        self.dictionary = dictionary if dictionary is not None else KSLDictionary()
        self.analyzer = MorphemeAnalyzer()
        self.rules = KSLRuleEngine()
        self.scorer = ConfidenceScorer(self.dictionary, self.analyzer, self.rules)
        logger.debug(f"KSL 변환기 초기화 완료 (사전 {self.dictionary.size()}개)")

    # ================================================================
    # - 메인 인터페이스
    # ================================================================

    def convert(self, text: Optional[str]) -> Optional[ConversionResult]:
        """
        한국어 문장을 KSL 글로스로 변환

        Args:
            text: 한국어 문장 (음성 인식 결과 또는 직접 입력)

        Returns:
            ConversionResult, 빈 입력이면 None

        Example:
            >>> converter.convert("학교에 가요").gloss
            '학교 가다 {dir:1→3}'
        """
        if text is None:
            return None

        if not isinstance(text, str):
            logger.warning(f"문자열이 아닌 입력: {type(text).__name__}")
            return self._degraded(str(text))

        if not text.strip():
            return None

        try:
            result = self._convert(text)
        except self.PROCESSING_ERRORS as e:
            logger.error(f"KSL 변환 오류: {e}")
            return self._degraded(text)

        if result.is_degraded:
            return result

        logger.info(
            f"- 변환: '{text}' → '{result.gloss}' {result.tags} "
            f"(신뢰도 {result.confidence:.2f}, {result.tier_label})"
        )
        return result

    def _convert(self, text: str) -> ConversionResult:
        # Step 1: 정규화 + 토큰화
        words = self.tokenize(self.normalize_text(text))

        if not words:
            # 문장부호만 있는 입력
            logger.warning(f"변환할 단어 없음: '{text}'")
            return self._degraded(text)

        # Step 2: 사전 매핑
        gloss_words = self.map_to_gloss(words)

        # Step 3: 규칙 적용
        processed_words = self.apply_rules(gloss_words)

        # Step 4: 글로스 + 태그
        gloss = " ".join(processed_words)
        tags = self.generate_tags(text, processed_words)

        # Step 5: 신뢰도
        confidence = self.calculate_confidence(words, gloss_words, text, processed_words).total

        # Step 6: 신뢰도 기반 적응형 처리
        tier = self.select_tier(confidence)

        if tier == OutputTier.VERY_LOW:
            # 원문을 우선 보여주고 변환 시도는 괄호로 표시
            gloss = f"[KSL:{gloss}] {text}"
        elif tier == OutputTier.LOW:
            # 하이브리드: 방향 태그 없이 전면화만 다시 적용
            gloss = " ".join(self.rules.move_time_place(self._hybrid_words(words, gloss_words)))

        return ConversionResult(
            original=text,
            gloss=gloss,
            tags=tags,
            confidence=confidence,
            tier=tier,
        )

    def _degraded(self, text: str) -> ConversionResult:
        """처리 실패 시 원문을 그대로 돌려주는 결과"""
        return ConversionResult(
            original=text,
            gloss=text,
            tags=NEUTRAL_TAG,
            confidence=0.0,
            tier=None,
            is_degraded=True,
        )

    # ================================================================
    # - 파이프라인 단계
    # ================================================================

    def normalize_text(self, text: str) -> str:
        """문장부호 제거 + 공백 정리"""
        text = self.PUNCTUATION.sub("", text)
        return re.sub(r"\s+", " ", text).strip()

    def tokenize(self, text: str) -> List[str]:
        return [word for word in text.split() if word]

    def map_to_gloss(self, words: List[str]) -> List[str]:
        """
        단어별 글로스 매핑

        1. 사전 정확히 일치
        2. 형태소 분석 어간으로 사전 조회
        3. 실패 시 원본 유지 (없는 글로스를 만들지 않음)
        """
        return [self._map_word(word) for word in words]

    def _map_word(self, word: str) -> str:
        gloss = self.dictionary.lookup(word)
        if gloss is not None:
            return gloss

        stem = self.analyzer.analyze(word).stem
        gloss = self.dictionary.lookup(stem) if stem else None
        if gloss is not None:
            return gloss

        return word

    def apply_rules(self, words: List[str]) -> List[str]:
        """시간/장소 전면화 → 방향동사 태그 ('가다 {dir:1→3}'은 하나의 단위)"""
        processed = self.rules.move_time_place(words)
        return self.rules.add_directional_tags(processed)

    def generate_tags(self, original_text: str, words: List[str]) -> str:
        sentence_type = self.rules.get_sentence_type(original_text)
        return self.rules.get_sign_language_tags(sentence_type, original_text, words)

    def calculate_confidence(self, words: List[str], gloss_words: List[str],
                             original_text: str, processed_words: List[str]) -> ConfidenceBreakdown:
        return self.scorer.score(words, gloss_words, original_text, processed_words)

    @staticmethod
    def select_tier(confidence: float) -> OutputTier:
        """신뢰도 구간 → 출력 전략"""
        if confidence < VERY_LOW_CONFIDENCE:
            return OutputTier.VERY_LOW
        if confidence < LOW_CONFIDENCE:
            return OutputTier.LOW
        return OutputTier.NORMAL

    def _hybrid_words(self, words: List[str], gloss_words: List[str]) -> List[str]:
        """사전(직접 또는 어간)에 있는 단어만 글로스로, 나머지는 원본 유지"""
        hybrid = []
        for word, gloss in zip(words, gloss_words):
            stem = self.analyzer.analyze(word).stem
            if word in self.dictionary or (stem and stem in self.dictionary):
                hybrid.append(gloss or word)
            else:
                hybrid.append(word)
        return hybrid

    # ================================================================
    # - 단어별 분석
    # ================================================================

    def analyze_words(self, text: str) -> List[WordMapping]:
        """
        단어별 변환 내역

        화면에서 어떤 단어가 사전에 없는지 표시할 때 사용
        """
        if not text or not text.strip():
            return []

        mappings = []
        for word in self.tokenize(self.normalize_text(text)):
            analysis = self.analyzer.analyze(word)
            in_dictionary = word in self.dictionary or analysis.stem in self.dictionary
            mappings.append(WordMapping(
                original=word,
                ksl=self._map_word(word),
                in_dictionary=in_dictionary,
                analysis=analysis,
            ))
        return mappings

    # ================================================================
    # - 사전 관리
    # ================================================================

    def add_to_dictionary(self, word: str, gloss: str) -> None:
        """새 단어 추가 (기존 단어는 덮어씀)"""
        self.dictionary.add(word, gloss)

    def is_in_dictionary(self, word: str) -> bool:
        return word in self.dictionary

    def dictionary_size(self) -> int:
        return self.dictionary.size()


# ================================================================================
# 테스트
# ================================================================================

if __name__ == "__main__":
    converter = KSLConverter()

    test_cases = [
        "안녕하세요",
        "안녕하세요, 반갑습니다!",
        "학교에 가요",
        "어디 가요?",
        "친구 학교 오늘 먹어요",
        "밥을 안 먹어요",
        "드세요",
        "블라블라 쿵쿵 가다",
        "qwerty zxcv",
        "?!",
    ]

    print("\n" + "=" * 70)
    print("KSL 변환 테스트")
    print("=" * 70 + "\n")

    for text in test_cases:
        result = converter.convert(text)
        print(f"- 입력: {text}")
        print(f"- 글로스: {result.gloss}")
        print(f"- 태그: {result.tags}")
        print(f"- 신뢰도: {result.confidence:.2f} ({result.tier_label})")
        print("-" * 50)

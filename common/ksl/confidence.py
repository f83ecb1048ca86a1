from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .config import (
    DECLARATIVE_SCORE,
    DICTIONARY_WEIGHT,
    DIR_TAG_MARKER,
    DIRECTIONAL_PARTIAL_SCORE,
    DIRECTIONAL_SCORE,
    MORPHEME_WEIGHT,
    RULE_NORMALIZER,
    SENTENCE_BASE_SCORE,
    TIME_PLACE_SCORE,
)
from .dictionary import KSLDictionary
from .morphology import MorphemeAnalyzer
from .rules import KSLRuleEngine, SentenceType


@dataclass(frozen=True)
class ConfidenceBreakdown:
    """
    신뢰도 세부 점수

    Attributes:
        dictionary: 사전 매칭률 점수 (0 ~ 0.6)
        morphology: 형태소 분석 성공률 점수 (0 ~ 0.15)
        rules: 규칙 적용 점수 (정규화 후)
        sentence: 문장 유형 점수 (0.08 ~ 0.1)
        total: 최종 신뢰도 [0, 1]
    """
    dictionary: float
    morphology: float
    rules: float
    sentence: float
    total: float


class ConfidenceScorer:
    """
    변환 신뢰도 계산

    [가중치]
    - 사전 매칭률: 60%
    - 형태소 분석 성공률: 15%
    - 규칙 적용 (시간/장소, 방향동사): x3 정규화
    - 문장 유형 분석: 10%
    """

    # 신뢰도 계산용 시간/장소 표현 (단방향 포함 확인)
    TIME_WORDS = ("오늘", "내일", "어제", "오전", "오후", "아침", "점심", "저녁")
    PLACE_WORDS = ("학교", "집", "병원", "도서관", "마트", "식당", "회사")

    DIRECTIONAL_VERBS = ("가다", "오다", "주다", "받다")

    NEGATION_CUE = "안"
    IMPERATIVE_CUE = "세요"

    def __init__(self, dictionary: KSLDictionary, analyzer: MorphemeAnalyzer,
                 rules: KSLRuleEngine):
        self.dictionary = dictionary
        self.analyzer = analyzer
        self.rules = rules

    def score(self, words: Sequence[str], gloss_words: Sequence[str],
              original_text: str, processed_words: Sequence[str]) -> ConfidenceBreakdown:
        """
        신뢰도 계산

        Args:
            words: 원본 단어 (토큰화 결과)
            gloss_words: 사전/형태소 매핑 결과 (점수 계산에는 쓰지 않음)
            original_text: 정규화 전 원문
            processed_words: 규칙 적용 후 단어

        Returns:
            ConfidenceBreakdown: 세부 점수와 최종 신뢰도
        """
        if not words:
            return ConfidenceBreakdown(0.0, 0.0, 0.0, 0.0, 0.0)

        analyses = [self.analyzer.analyze(word) for word in words]

        mapped_count = sum(
            1 for word, analysis in zip(words, analyses)
            if word in self.dictionary or analysis.stem in self.dictionary
        )
        morpheme_count = sum(1 for analysis in analyses if analysis.succeeded)

        rates = np.minimum(np.array([mapped_count, morpheme_count]) / len(words), 1.0)
        dictionary_score, morpheme_score = rates * np.array([DICTIONARY_WEIGHT, MORPHEME_WEIGHT])

        rule_score = self._rule_score(words, processed_words)
        sentence_score = self._sentence_score(original_text)

        total = np.clip(dictionary_score + morpheme_score + rule_score + sentence_score, 0.0, 1.0)

        return ConfidenceBreakdown(
            dictionary=float(dictionary_score),
            morphology=float(morpheme_score),
            rules=float(rule_score),
            sentence=float(sentence_score),
            total=float(total),
        )

    def _rule_score(self, words: Sequence[str],
                    processed_words: Sequence[str]) -> float:
        score = 0.0

        has_time_place = any(
            term in word
            for word in words
            for term in self.TIME_WORDS + self.PLACE_WORDS
        )
        if has_time_place:
            score += TIME_PLACE_SCORE

        has_directional_tag = any(DIR_TAG_MARKER in word for word in processed_words)
        has_directional_verb = any(
            verb in word
            for word in words
            for verb in self.DIRECTIONAL_VERBS
        )

        if has_directional_verb and has_directional_tag:
            score += DIRECTIONAL_SCORE
        elif has_directional_verb:
            score += DIRECTIONAL_PARTIAL_SCORE  # 부분 점수

        return score * RULE_NORMALIZER

    def _sentence_score(self, original_text: str) -> float:
        """표면 단서가 판별된 문장 유형과 일치하는지 확인"""
        sentence_type = self.rules.get_sentence_type(original_text)

        if sentence_type == SentenceType.QUESTION and "?" in original_text:
            return SENTENCE_BASE_SCORE
        if sentence_type == SentenceType.NEGATIVE and self.NEGATION_CUE in original_text:
            return SENTENCE_BASE_SCORE
        if sentence_type == SentenceType.IMPERATIVE and self.IMPERATIVE_CUE in original_text:
            return SENTENCE_BASE_SCORE
        if sentence_type == SentenceType.DECLARATIVE:
            return DECLARATIVE_SCORE

        return SENTENCE_BASE_SCORE

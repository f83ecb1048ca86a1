"""
KSL (Korean Sign Language) 변환 모듈

한국어 문장을 한국 수어 글로스와 비수지 신호 태그로 변환합니다.

주요 기능:
- 사전 + 형태소 분석 기반 단어 매핑
- 높임말/불규칙 활용/시제 어미 분리
- 시간/장소 전면화, 방향동사 태그
- 문장 유형 판별 및 비수지 신호(NMM) 태그
- 신뢰도 계산 및 신뢰도 구간별 출력 전략

사용 예시:
    >>> from common.ksl import KSLConverter
    >>>
    >>> converter = KSLConverter()
    >>> result = converter.convert('학교에 가요')
    >>> print(result.gloss)
    '학교 가다 {dir:1→3}'
    >>> print(result.tags)
    '{NMM:neutral}'
"""

from .confidence import ConfidenceBreakdown, ConfidenceScorer
from .converter import ConversionResult, KSLConverter, OutputTier, WordMapping
from .dictionary import BASE_VOCABULARY, KSLDictionary
from .morphology import MorphemeAnalysis, MorphemeAnalyzer
from .rules import KSLRuleEngine, SentenceType

__version__ = '1.0.0'
__all__ = [
    'KSLConverter',
    'ConversionResult',
    'OutputTier',
    'WordMapping',
    'KSLDictionary',
    'BASE_VOCABULARY',
    'MorphemeAnalyzer',
    'MorphemeAnalysis',
    'KSLRuleEngine',
    'SentenceType',
    'ConfidenceScorer',
    'ConfidenceBreakdown',
]

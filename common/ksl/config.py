import logging

# ================================================================================
# 변환 설정
# ================================================================================

# 신뢰도 구간 (적응형 출력 전략 선택)
VERY_LOW_CONFIDENCE = 0.3   # 미만: 원문 유지 + 변환 시도 표시
LOW_CONFIDENCE = 0.5        # 미만: 하이브리드 (사전 단어만 글로스로 치환)

# 신뢰도 가중치
DICTIONARY_WEIGHT = 0.6     # 사전 매칭률
MORPHEME_WEIGHT = 0.15      # 형태소 분석 성공률
RULE_NORMALIZER = 3         # 규칙 점수 정규화 배수
TIME_PLACE_SCORE = 0.05     # 시간/장소 표현 존재
DIRECTIONAL_SCORE = 0.05    # 방향동사 + 방향 태그
DIRECTIONAL_PARTIAL_SCORE = 0.02  # 방향동사만 있고 태그 없음
SENTENCE_BASE_SCORE = 0.1   # 문장 유형 기본 점수
DECLARATIVE_SCORE = 0.08    # 확인 단서 없는 평서문

# 태그
NEUTRAL_TAG = "{NMM:neutral}"
DIR_TAG_MARKER = "{dir:"
DIR_FIRST_TO_THIRD = "{dir:1→3}"   # 1인칭 → 3인칭
DIR_THIRD_TO_FIRST = "{dir:3→1}"   # 3인칭 → 1인칭

# ================================================================================
# 로깅 설정
# ================================================================================

LOG_LEVEL = logging.INFO
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'


def get_logger(name: str) -> logging.Logger:
    """
    모듈 로거 생성

    콘솔 핸들러가 없을 때만 추가 (중복 방지)
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(LOG_LEVEL)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)
        logger.setLevel(LOG_LEVEL)

    return logger

import pytest

from common.ksl import KSLConverter, KSLDictionary, KSLRuleEngine, MorphemeAnalyzer


@pytest.fixture
def converter():
    return KSLConverter()


@pytest.fixture
def analyzer():
    return MorphemeAnalyzer()


@pytest.fixture
def rules():
    return KSLRuleEngine()


@pytest.fixture
def dictionary():
    return KSLDictionary()

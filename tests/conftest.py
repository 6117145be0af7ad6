"""
Pytest configuration and fixtures for banky-edu tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing banky_edu
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from banky_edu.education.models import EducationModule  # noqa: E402
from banky_edu.localization import TermMap, TextAdapter  # noqa: E402


@pytest.fixture
def term_map() -> TermMap:
    """The packaged term dictionary."""
    return TermMap.default()


@pytest.fixture
def text_adapter(term_map: TermMap) -> TextAdapter:
    return TextAdapter(term_map)


@pytest.fixture
def full_module() -> EducationModule:
    """A module using every step field group, authored in canonical US style."""
    return EducationModule.model_validate({
        "id": "unit-test",
        "title": "Your 401k and the IRS",
        "description": "Grow $100 into a FICO-proof future.",
        "xpReward": 300,
        "isCompleted": False,
        "category": "Investing",
        "estimatedTime": "6m",
        "playbook": {
            "summary": "A Roth IRA grows tax-free.",
            "realLifeExample": "Put $500 a month into an S&P 500 fund.",
            "definitions": [
                {"term": "401k", "definition": "Employer plan. The IRS caps it; FICO doesn't matter."},
                {"term": "Net Worth", "definition": "Assets minus Liabilities."},
            ],
            "actionableSteps": ["Log into your 401k provider.", "Check your FICO score."],
        },
        "steps": [
            {"id": "t-1", "type": "info", "content": "The IRS taxes income."},
            {
                "id": "t-2", "type": "question", "content": "Best first $1000?",
                "options": [
                    {"id": "a", "text": "401k match", "isCorrect": True, "feedback": "Free $ from your boss."},
                    {"id": "b", "text": "Lottery", "isCorrect": False, "feedback": "The IRS takes a cut."},
                ],
                "correctAnswerExplanation": "Always take the 401k match.",
            },
            {
                "id": "t-3", "type": "scenario", "content": "You have $5000.",
                "scenarioOptions": [
                    {"text": "Open a Roth IRA", "isCorrect": True, "feedback": "Tax-free growth."},
                    {"text": "Buy a watch", "isCorrect": False, "feedback": "Watches don't track the S&P 500."},
                ],
            },
            {
                "id": "t-4", "type": "connections", "content": "Match them.",
                "connectionPairs": [
                    {"term": "401k", "match": "Employer Match"},
                    {"term": "FICO", "match": "Credit"},
                ],
            },
            {
                "id": "t-5", "type": "fill-blank", "content": "Report income to the [BLANK].",
                "fillBlankCorrect": "IRS",
                "fillBlankOptions": ["IRS", "FICO", "Bank"],
            },
            {
                "id": "t-6", "type": "sorting", "content": "Order by tax efficiency.",
                "sortCorrectOrder": ["Roth IRA", "401k", "Brokerage"],
            },
            {
                "id": "t-7", "type": "slider-allocator", "content": "Split $1000.",
                "allocatorCategories": [
                    {"label": "401k", "targetPercent": 20, "startPercent": 0},
                    {"label": "Rent", "targetPercent": 50, "startPercent": 33.5},
                ],
            },
            {
                "id": "t-8", "type": "text-selector", "content": "Pay the IRS $500 in gift cards now!",
                "selectorTargetPhrases": ["IRS", "gift cards"],
            },
            {
                "id": "t-9", "type": "binary-choice", "content": "Max the Roth IRA?",
                "binaryLeft": {"label": "Skip", "isCorrect": False, "feedback": "You lose $ to the IRS."},
                "binaryRight": {"label": "Roth IRA", "isCorrect": True, "feedback": "Nice."},
            },
            {
                "id": "t-10", "type": "card-swipe", "content": "Swipe on FICO myths.",
                "binaryRight": {"label": "Myth", "isCorrect": True, "feedback": "Checking FICO is free."},
            },
        ],
    })


@pytest.fixture
def module_without_playbook() -> EducationModule:
    return EducationModule.model_validate({
        "id": "unit-bare",
        "title": "Bare",
        "description": "No playbook here.",
        "xpReward": 10,
        "category": "Basics",
        "estimatedTime": "1m",
        "steps": [{"id": "b-1", "type": "info", "content": "Just $5."}],
    })

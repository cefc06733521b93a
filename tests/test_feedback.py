from datetime import datetime, timezone

import pytest

from conftest import ScriptedRandom
from interview_core.models import Category, Session
from interview_core.prompts import DefaultTemplateFactory
from interview_core.prompts import feedback as texts
from interview_core.services.feedback import (
    MockFeedbackSynthesizer,
    clamp_score,
    synthesize,
)


def make_session(category=Category.TECHNICAL, answers=("a", "b", "c")):
    return Session(
        id="interview_1",
        category=category,
        role_title="Backend Engineer",
        questions=tuple(f"Q{i}" for i in range(len(answers))),
        answers=list(answers),
        started_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def test_all_answered_uses_plain_category_template():
    rng = ScriptedRandom(choices=[0, 1, 4], scores=[87])
    fb, score = synthesize(
        make_session(Category.BEHAVIORAL), rng=rng, templates=DefaultTemplateFactory()
    )

    assert score == 87
    assert fb.general_feedback == texts.GENERAL_FEEDBACK[Category.BEHAVIORAL]
    assert fb.strengths == list(texts.STRENGTHS[Category.BEHAVIORAL])
    assert fb.improvements == list(texts.IMPROVEMENTS[Category.BEHAVIORAL])
    assert fb.detailed_feedback == [
        texts.DETAIL_POOL[0],
        texts.DETAIL_POOL[1],
        texts.DETAIL_POOL[4],
    ]


def test_blank_answers_add_penalty_and_answer_all_item():
    session = make_session(Category.SYSTEM_DESIGN, answers=("Use a hash ring", "   ", ""))
    fb, _ = synthesize(
        session, rng=ScriptedRandom(choices=[2]), templates=DefaultTemplateFactory()
    )

    assert fb.general_feedback.endswith(texts.PENALTY_CLAUSE)
    assert fb.improvements[0] == texts.ANSWER_ALL_ITEM
    assert len(fb.improvements) == 4
    assert fb.detailed_feedback == [
        texts.DETAIL_POOL[2],
        texts.NOT_ANSWERED_NOTE,
        texts.NOT_ANSWERED_NOTE,
    ]


def test_templates_are_not_mutated_between_calls():
    templates = DefaultTemplateFactory()
    synthesize(make_session(answers=("", "")), rng=ScriptedRandom(), templates=templates)
    fb, _ = synthesize(
        make_session(answers=("x", "y")), rng=ScriptedRandom(), templates=templates
    )

    assert texts.ANSWER_ALL_ITEM not in fb.improvements
    assert texts.PENALTY_CLAUSE not in fb.general_feedback


def test_synthesis_leaves_the_session_untouched():
    session = make_session(answers=("", "y"))
    synthesize(session, rng=ScriptedRandom(), templates=DefaultTemplateFactory())

    assert session.feedback is None
    assert session.score is None
    assert session.answers == ["", "y"]


def test_mock_scores_stay_in_range_with_real_randomness():
    synth = MockFeedbackSynthesizer()
    for _ in range(200):
        _, score = synth.synthesize(make_session())
        assert 60 <= score <= 100


@pytest.mark.parametrize("raw,expected", [(-5, 0), (0, 0), (73, 73), (100, 100), (140, 100)])
def test_clamp_score(raw, expected):
    assert clamp_score(raw) == expected

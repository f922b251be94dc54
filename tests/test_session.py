"""
Tests for the quiz session state machine.
"""

import pytest

from article_quiz.errors import SessionStateError
from article_quiz.quiz.session import QuizSession, SessionPhase
from article_quiz.quiz.schema import TrueFalse, MultipleChoice, FillBlank


@pytest.fixture
def session(grader, sample_questions):
    true_false, multiple_choice, fill_blank = sample_questions
    return QuizSession(true_false, multiple_choice, fill_blank, grader)


@pytest.fixture
def two_question_session(grader):
    return QuizSession(
        [TrueFalse(question="Sky is blue", answer=True)],
        [MultipleChoice(question="2+2?", options=["3", "4", "5", "6"], answer=2)],
        [],
        grader,
    )


class TestSessionSetup:
    """Tests for construction and ordering."""

    def test_initial_state(self, session):
        assert session.phase == SessionPhase.START
        assert session.index == 0
        assert session.answers == {}
        assert session.results == []
        assert session.score is None

    def test_question_order(self, session):
        """True/false, then multiple choice, then fill in the blank."""
        kinds = [type(q) for q in session.all_questions]
        assert kinds == [TrueFalse, MultipleChoice, FillBlank]
        assert session.total == 3

    def test_source_lists_are_copied(self, grader):
        true_false = [TrueFalse(question="Q", answer=True)]
        session = QuizSession(true_false, [], [], grader)
        true_false.append(TrueFalse(question="Q2", answer=False))

        assert session.total == 1


class TestTransitions:
    """Tests for phase and index transitions."""

    def test_two_question_walkthrough(self, two_question_session):
        session = two_question_session

        session.begin()
        assert session.phase == SessionPhase.IN_PROGRESS
        assert session.index == 0

        session.next()
        assert session.index == 1

        session.next()
        assert session.phase == SessionPhase.RESULT
        assert [r.question for r in session.results] == ["Sky is blue", "2+2?"]

    def test_previous_moves_back(self, session):
        session.begin()
        session.next()
        session.next()
        session.previous()

        assert session.index == 1
        assert session.phase == SessionPhase.IN_PROGRESS

    def test_previous_from_first_returns_to_start(self, session):
        session.begin()
        session.record_answer(0, True)
        session.previous()

        assert session.phase == SessionPhase.START
        assert session.answers == {0: True}

    def test_begin_after_previous_clears_answers(self, session):
        session.begin()
        session.record_answer(0, True)
        session.previous()
        session.begin()

        assert session.answers == {}
        assert session.index == 0

    def test_submit_mid_quiz(self, session):
        session.begin()
        session.record_answer(0, True)
        session.submit()

        assert session.phase == SessionPhase.RESULT
        assert len(session.results) == 3
        assert [r.is_correct for r in session.results] == [True, False, False]
        assert session.score == 1

    def test_reset_from_result(self, session):
        questions = session.all_questions
        session.begin()
        session.record_answer(1, "4")
        session.submit()
        session.reset()

        assert session.phase == SessionPhase.START
        assert session.index == 0
        assert session.answers == {}
        assert session.results == []
        assert session.score is None

        session.begin()
        assert session.all_questions == questions
        assert session.current_question == questions[0]
        assert session.answers == {}

    def test_reset_from_in_progress(self, session):
        session.begin()
        session.next()
        session.reset()

        assert session.phase == SessionPhase.START
        assert session.index == 0

    def test_empty_quiz(self, grader):
        session = QuizSession([], [], [], grader)
        session.begin()

        assert session.current_question is None
        session.next()
        assert session.phase == SessionPhase.RESULT
        assert session.results == []
        assert session.score == 0

    @pytest.mark.parametrize("action", ["next", "previous", "submit"])
    def test_in_progress_only_actions_from_start(self, session, action):
        with pytest.raises(SessionStateError):
            getattr(session, action)()

    def test_begin_twice(self, session):
        session.begin()
        with pytest.raises(SessionStateError):
            session.begin()

    def test_no_navigation_after_result(self, session):
        session.begin()
        session.submit()
        with pytest.raises(SessionStateError):
            session.next()


class TestAnswers:
    """Tests for recording answers."""

    def test_record_current(self, session):
        session.begin()
        session.record_answer(0, True)

        assert session.current_answer is True
        assert session.answer_for(0) is True

    def test_record_other_position(self, session):
        """Answers may be recorded for any position."""
        session.begin()
        session.record_answer(2, "Paris")

        assert session.answer_for(2) == "Paris"
        assert session.index == 0

    def test_overwrite(self, session):
        session.begin()
        session.record_answer(1, "3")
        session.record_answer(1, "4")

        assert session.answers == {1: "4"}

    def test_record_outside_in_progress(self, session):
        with pytest.raises(SessionStateError):
            session.record_answer(0, True)

    def test_record_bad_index(self, session):
        session.begin()
        with pytest.raises(IndexError):
            session.record_answer(3, "x")

    def test_record_bad_type(self, session):
        session.begin()
        with pytest.raises(TypeError):
            session.record_answer(1, 4)

    def test_answers_property_is_a_copy(self, session):
        session.begin()
        session.answers[0] = True
        assert session.answers == {}


class TestScoringAndView:
    """Tests for score and to_dict."""

    def test_all_correct(self, session):
        session.begin()
        session.record_answer(0, True)
        session.record_answer(1, "4")
        session.record_answer(2, "paris")
        session.next()
        session.next()
        session.next()

        assert session.phase == SessionPhase.RESULT
        assert session.score == 3

    def test_to_dict_hides_answers(self, session):
        session.begin()
        session.next()
        view = session.to_dict()

        assert view["phase"] == "in_progress"
        assert view["current_question"] == {
            "kind": "multiple_choice",
            "question": "2+2?",
            "options": ["3", "4", "5", "6"],
        }
        assert view["score"] is None

    def test_to_dict_result(self, session):
        session.begin()
        session.submit()
        view = session.to_dict()

        assert view["phase"] == "result"
        assert view["current_question"] is None
        assert len(view["results"]) == 3
        assert view["score"] == 0

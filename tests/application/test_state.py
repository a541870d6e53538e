"""Tests for the pure application state transitions."""

from infogenius.application import state as transitions
from infogenius.application.state import AppState, ErrorKind, LoadingStep
from infogenius.models.context import ContextSource, ContextSourceType
from infogenius.models.infographic import ResearchResult, SearchResultItem


class TestCycleTransitions:
    """Test the Idle -> Researching -> Designing -> Idle sequence."""

    def test_research_started_clears_previous_results(self):
        before = AppState(error="old", error_kind=ErrorKind.VALIDATION, loading_facts=("stale",))

        after = transitions.research_started(before)

        assert after.is_loading is True
        assert after.loading_step == LoadingStep.RESEARCHING
        assert after.loading_message == "Researching..."
        assert after.loading_facts == ()
        assert after.error is None
        # input untouched
        assert before.error == "old"

    def test_research_completed_exposes_facts_and_citations(self):
        result = ResearchResult(
            image_prompt="p",
            facts=["a", "b"],
            search_results=[SearchResultItem(title="t", url="https://u")],
        )

        after = transitions.research_completed(transitions.research_started(AppState()), result)

        assert after.loading_step == LoadingStep.DESIGNING
        assert after.loading_message == "Designing Infographic..."
        assert after.loading_facts == ("a", "b")
        assert after.search_results[0].url == "https://u"

    def test_edit_started_quotes_instruction(self):
        after = transitions.edit_started(AppState(), "Make it blue")

        assert after.loading_step == LoadingStep.DESIGNING
        assert after.loading_message == 'Processing Modification: "Make it blue"...'

    def test_image_created_prepends_and_activates(self, make_image):
        older = make_image("1")
        newer = make_image("2")

        after = transitions.image_created(transitions.history_loaded(AppState(), [older]), newer)

        assert [img.id for img in after.history] == ["2", "1"]
        assert after.active_image == newer

    def test_image_created_clears_stale_error(self, make_image):
        before = transitions.validation_failed(AppState(), "File too large")

        after = transitions.image_created(before, make_image("1"))

        assert after.error is None
        assert after.error_kind is None

    def test_access_denied_drops_api_key_flag(self):
        after = transitions.cycle_failed(AppState(), "denied", ErrorKind.ACCESS_DENIED)

        assert after.has_api_key is False
        assert after.error_kind == ErrorKind.ACCESS_DENIED

    def test_other_failures_keep_api_key_flag(self):
        after = transitions.cycle_failed(AppState(), "busy", ErrorKind.SERVICE_UNAVAILABLE)
        assert after.has_api_key is True

    def test_cycle_finished_returns_to_idle(self):
        after = transitions.cycle_finished(transitions.research_started(AppState()))

        assert after.is_loading is False
        assert after.loading_step == LoadingStep.IDLE


class TestSessionTransitions:
    """Test session, history and context transitions."""

    def test_history_loaded_activates_newest(self, make_image):
        after = transitions.history_loaded(AppState(), [make_image("2"), make_image("1")])
        assert after.active_image_id == "2"

    def test_history_loaded_empty(self):
        assert transitions.history_loaded(AppState(), []).active_image_id is None

    def test_session_reset_keeps_history(self, make_image):
        source = ContextSource(id="s", type=ContextSourceType.URL, name="u", content="u")
        before = transitions.context_source_added(
            transitions.history_loaded(AppState(), [make_image("1")]), source
        )

        after = transitions.session_reset(before)

        assert len(after.history) == 1
        assert after.active_image_id is None
        assert after.context_sources == ()

    def test_history_cleared(self, make_image):
        after = transitions.history_cleared(transitions.history_loaded(AppState(), [make_image("1")]))

        assert after.history == ()
        assert after.active_image is None

    def test_context_source_removed(self):
        keep = ContextSource(id="keep", type=ContextSourceType.URL, name="a", content="a")
        drop = ContextSource(id="drop", type=ContextSourceType.URL, name="b", content="b")
        state = transitions.context_source_added(transitions.context_source_added(AppState(), keep), drop)

        after = transitions.context_source_removed(state, "drop")

        assert after.context_sources == (keep,)

    def test_api_key_selected_clears_error(self):
        denied = transitions.cycle_failed(AppState(), "denied", ErrorKind.ACCESS_DENIED)

        after = transitions.api_key_selected(denied)

        assert after.has_api_key is True
        assert after.error is None

"""
Unit tests for the deterministic fallback content.
"""

import pytest

from pathwayz.fallbacks import FALLBACK_CAREER_ADVICE, FALLBACK_PROFILE, fallback_for
from pathwayz.schemas import CAREER_PATH_COUNT, is_career_advice, is_prompt_entry, is_trait_profile
from pathwayz.script import FINAL_TURN


class TestFallbackTurns:
    @pytest.mark.parametrize("turn", range(-1, FINAL_TURN + 4))
    def test_same_turn_gives_identical_content(self, turn):
        assert fallback_for(turn).model_dump_json() == fallback_for(turn).model_dump_json()

    @pytest.mark.parametrize("turn", range(-1, FINAL_TURN))
    def test_never_finale_before_final_turn(self, turn):
        entry = fallback_for(turn)
        assert entry.question_type != "finale"
        assert entry.options

    @pytest.mark.parametrize("turn", [FINAL_TURN, FINAL_TURN + 1, 42])
    def test_finale_from_final_turn_on(self, turn):
        entry = fallback_for(turn)
        assert entry.is_finale
        assert entry.options == []

    def test_turn_ranges(self):
        assert fallback_for(1) == fallback_for(2)
        assert fallback_for(1).question_type == "multi-choice"
        assert fallback_for(3) == fallback_for(4)
        assert fallback_for(3).question_type == "single-choice"
        assert fallback_for(5) == fallback_for(6)
        assert fallback_for(5).question_type == "multi-choice"
        assert fallback_for(7) == fallback_for(8)
        assert fallback_for(7).question_type == "single-choice"
        assert len({fallback_for(n).narrative for n in (1, 3, 5, 7, 9)}) == 5

    def test_returned_entry_is_a_copy(self):
        entry = fallback_for(3)
        entry.options.append("Something else")

        assert "Something else" not in fallback_for(3).options

    @pytest.mark.parametrize("turn", range(1, FINAL_TURN + 1))
    def test_wire_shape_is_a_valid_turn(self, turn):
        assert is_prompt_entry(fallback_for(turn).to_document())


class TestFallbackDocuments:
    def test_profile_passes_shape_check(self):
        assert is_trait_profile(FALLBACK_PROFILE.to_document())

    def test_career_advice_passes_shape_check(self):
        assert is_career_advice(FALLBACK_CAREER_ADVICE.to_document())
        assert len(FALLBACK_CAREER_ADVICE.paths) == CAREER_PATH_COUNT

    def test_career_titles_are_distinct(self):
        titles = [path.title for path in FALLBACK_CAREER_ADVICE.paths]
        assert len(set(titles)) == len(titles)

"""
The Career Quest Adventure script.

Nine fixed turns: the Leisure Village opening and its follow-up, then the
Puzzle Peak, Team Tavern and Motivation Maze pairs, then the finale. Only the
opening narrative is personalised (name and place); everything after it is
scripted word for word.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .schemas import IntakeData, PromptEntry, QuestionType


@dataclass(frozen=True)
class TurnDefinition:
	number: int
	scenario: str
	label: str
	narrative: str
	question_type: QuestionType
	options: Tuple[str, ...] = field(default_factory=tuple)

	def render(self, intake: Optional[IntakeData] = None) -> PromptEntry:
		narrative = self.narrative
		if intake is not None:
			narrative = narrative.format(
				name=(intake.name or "Explorer").strip(),
				city_state=(intake.place or "your hometown").strip(),
			)
		return PromptEntry(narrative=narrative, question_type=self.question_type, options=list(self.options))


TURNS: Tuple[TurnDefinition, ...] = (
	TurnDefinition(
		number=1,
		scenario="Leisure Village",
		label="Scenario 1, Question 1 - Initial question (single-choice)",
		narrative=(
			"Welcome, {name}! Your Career Quest Adventure begins now. You stumble into a colorful village "
			"buzzing with life, as vibrant as the streets of {city_state}. The sun is setting, and you have "
			"free time before nightfall. What catches your eye to unwind and recharge?"
		),
		question_type="single-choice",
		options=(
			"Wander the woods, tinkering with gadgets from scraps.",
			"Dive into ancient scrolls in the library, decoding secrets.",
			"Sketch landscapes or perform for villagers.",
			"Chat with locals, organizing a group game.",
		),
	),
	TurnDefinition(
		number=2,
		scenario="Leisure Village",
		label="Scenario 1, Question 2 - Follow-up about school subjects (multi-choice)",
		narrative="The activity sparks your curiosity! Select up to two school subjects that feel just as exciting:",
		question_type="multi-choice",
		options=(
			"Math",
			"Science",
			"Art/Design",
			"History",
			"Languages/Literature",
			"Computer Science/Coding",
			"Business/Economics",
			"Sports/Physical Education",
			"Music/Performing Arts",
			"None of these",
		),
	),
	TurnDefinition(
		number=3,
		scenario="Puzzle Peak",
		label="Scenario 2, Question 1 - Puzzle Peak initial question (single-choice)",
		narrative=(
			"A towering peak blocks your path, guarded by a massive stone puzzle that shifts like a living "
			"maze. How do you tackle it to press on?"
		),
		question_type="single-choice",
		options=(
			"Study the patterns closely, calculating the right moves.",
			"Improvise a wild invention to trick the mechanism.",
			"Get physical: climb and adjust parts by hand.",
			"Call out to fellow travelers for ideas and lead the effort.",
		),
	),
	TurnDefinition(
		number=4,
		scenario="Puzzle Peak",
		label="Scenario 2, Question 2 - Follow-up about strengths (multi-choice)",
		narrative="As the puzzle clicks open, a strength of yours glows bright. Select up to two that felt spot-on:",
		question_type="multi-choice",
		options=(
			"Spotting hidden patterns",
			"Quick creative sparks",
			"Hands-on fixing",
			"Motivating others",
			"Logical planning",
			"Adapting on the fly",
		),
	),
	TurnDefinition(
		number=5,
		scenario="Team Tavern",
		label="Scenario 3, Question 1 - Team Tavern role selection (single-choice)",
		narrative=(
			"In a lively tavern filled with quest-goers, a wise elder recruits you for a side mission. "
			"Based on what you've handled before, what role do you grab?"
		),
		question_type="single-choice",
		options=(
			"Plan the map and strategy, keeping everything organized.",
			"Build tools or scout ahead solo.",
			"Rally the group, communicating plans.",
			"Analyze clues and risks from afar.",
		),
	),
	TurnDefinition(
		number=6,
		scenario="Team Tavern",
		label="Scenario 3, Question 2 - Past experience matching (single-choice)",
		narrative=(
			"The mission succeeds thanks to your input! Select the closest match to a past experience "
			"where you shone similarly:"
		),
		question_type="single-choice",
		options=(
			"Led a school club event or team project.",
			"Built a model or app for a class assignment.",
			"Presented ideas in a debate or group discussion.",
			"Researched and wrote a report on a topic.",
			"Organized a fundraiser or volunteer activity.",
			"None of these.",
		),
	),
	TurnDefinition(
		number=7,
		scenario="Motivation Maze",
		label="Scenario 4, Question 1 - Motivation maze paths (single-choice)",
		narrative=(
			"You enter a foggy maze where glowing paths whisper promises. Which one pulls you deepest, "
			"fueling your steps forward?"
		),
		question_type="single-choice",
		options=(
			"The trail of change: Shaping a better world for all.",
			"The wanderer's way: Total freedom to explore unbound.",
			"The seeker's shadow: Unearthing forgotten truths.",
			"The builder's bridge: Creating something enduring.",
		),
	),
	TurnDefinition(
		number=8,
		scenario="Motivation Maze",
		label="Scenario 4, Question 2 - Work environment preference (single-choice)",
		narrative=(
			"One last twist: Would you rather navigate this maze alone, with a close-knit team, or "
			"remotely via magic mirrors?"
		),
		question_type="single-choice",
		options=("Solo adventure.", "Team huddle.", "Remote vibes."),
	),
	TurnDefinition(
		number=9,
		scenario="Finale",
		label="Finale - Game completion message (finale)",
		narrative="The maze clears, and your adventure comes to a close. Your quest is complete. Thank you for playing!",
		question_type="finale",
	),
)

TURNS_BY_NUMBER: Dict[int, TurnDefinition] = {t.number: t for t in TURNS}
FIRST_TURN = TURNS[0].number
FINAL_TURN = next(t.number for t in TURNS if t.question_type == "finale")


def turn_definition(number: int) -> TurnDefinition:
	try:
		return TURNS_BY_NUMBER[number]
	except KeyError:
		raise KeyError(f"No scripted turn {number} (script has turns {FIRST_TURN}-{FINAL_TURN})") from None


def describe_script(turns: List[TurnDefinition] | Tuple[TurnDefinition, ...] = TURNS) -> str:
	"""Render the turn table as the EXACT QUESTIONS BY TURN block of the continuation prompt."""
	blocks: List[str] = []
	for t in turns:
		if t.number == FIRST_TURN:
			continue
		options = "[" + ", ".join(f'"{o}"' for o in t.options) + "]"
		blocks.append(
			f"Turn {t.number}: {t.scenario}\n"
			f'narrative: "{t.narrative}"\n'
			f'questionType: "{t.question_type}"\n'
			f"options: {options}"
		)
	return "\n\n".join(blocks)


def describe_progression(turns: List[TurnDefinition] | Tuple[TurnDefinition, ...] = TURNS) -> str:
	lines = []
	for t in turns:
		suffix = " (already completed)" if t.number == FIRST_TURN else ""
		lines.append(f"Turn {t.number}: {t.label}{suffix}")
	return "\n".join(lines)

"""
Deterministic substitutes for failed oracle calls.

Everything here is a constant or a pure lookup: the same turn number always maps
to the same content, and nothing depends on the clock, randomness or the
transcript. ``fallback_for`` never returns the finale below ``FINAL_TURN``.
"""

from __future__ import annotations

from .schemas import CareerAdvice, CareerPath, PromptEntry, TraitProfile
from .script import FINAL_TURN


_INTERESTS = PromptEntry(
	narrative=(
		"Welcome to your personalized career discovery journey! I'm your guide, and I'm excited to help "
		"you explore your potential and discover the careers that align with your unique strengths and "
		"interests. Let's begin with understanding what truly engages you."
	),
	question_type="multi-choice",
	question="Which of these activities do you find most engaging and energizing?",
	options=[
		"Solving complex puzzles, analyzing data, or working with numbers",
		"Creating art, writing, designing, or expressing ideas creatively",
		"Helping others, teaching, or working in teams",
		"Building, fixing, or understanding how things work mechanically",
	],
)

_WORK_STYLE = PromptEntry(
	narrative=(
		"Interesting! Your choices show a blend of analytical and creative thinking. Now I'd love to "
		"understand more about how you prefer to work and collaborate with others."
	),
	question_type="single-choice",
	question="When working on a project, which environment helps you perform your best?",
	options=[
		"Quiet, independent workspace where I can focus deeply",
		"Collaborative team environment with lots of discussion",
		"Flexible mix of both individual and team work",
		"Dynamic, fast-paced environment with variety",
	],
)

_PROBLEM_SOLVING = PromptEntry(
	narrative=(
		"Great insights into your work style! You seem to have a strong foundation for several exciting "
		"career paths. Let me gather a bit more information about your problem-solving approach."
	),
	question_type="multi-choice",
	question="When facing a challenging problem, which approaches do you naturally gravitate toward?",
	options=[
		"Break it down into smaller, manageable parts",
		"Research and gather information from multiple sources",
		"Brainstorm creative solutions and think outside the box",
		"Collaborate with others to get different perspectives",
	],
)

_MOTIVATION = PromptEntry(
	narrative="Great! Let's explore more about your interests and motivations.",
	question_type="single-choice",
	question="What type of activities energize you most?",
	options=[
		"Leading and organizing team projects",
		"Researching and analyzing complex information",
		"Creating and designing new things",
		"Helping and mentoring others",
	],
)

_FINALE = PromptEntry(
	narrative=(
		"Excellent! You've shown remarkable self-awareness throughout this assessment. Your responses "
		"show a unique combination of analytical thinking, creative problem-solving, and collaborative "
		"skills. Your quest is complete. Thank you for playing!"
	),
	question_type="finale",
)

def fallback_for(turn_number: int) -> PromptEntry:
	# Finale only once the scripted final turn is reached
	if turn_number >= FINAL_TURN:
		entry = _FINALE
	elif turn_number >= 7:
		entry = _MOTIVATION
	elif turn_number >= 5:
		entry = _PROBLEM_SOLVING
	elif turn_number >= 3:
		entry = _WORK_STYLE
	else:
		entry = _INTERESTS
	return entry.model_copy(deep=True)


FALLBACK_PROFILE = TraitProfile(
	core_motivators=["Personal Growth", "Creative Expression"],
	problem_solving_style="Adaptive & Thoughtful",
	preferred_work_environment="Flexible & Collaborative",
	key_aptitudes=["Critical Thinking", "Communication", "Adaptability"],
	interests_and_passions=["Technology", "Problem Solving"],
	personality_summary=(
		"You demonstrate a balanced approach to challenges, combining analytical thinking with creative "
		"solutions. Your responses show someone who values both personal development and meaningful "
		"impact, with strong communication skills and adaptability to different situations."
	),
)


FALLBACK_CAREER_ADVICE = CareerAdvice(
	direction=(
		"Your unique blend of analytical thinking and creative problem-solving positions you to lead in "
		"India's rapidly evolving tech-driven economy."
	),
	paths=[
		CareerPath(
			title="AI Ethics Consultant for Indian Enterprises",
			description=(
				"As India's AI adoption accelerates across sectors like fintech and healthtech, your analytical "
				"skills and ethical reasoning make you ideal for ensuring responsible AI implementation in Indian "
				"companies, riding the wave of India's Digital India initiative."
			),
		),
		CareerPath(
			title="Sustainable Tech Product Manager",
			description=(
				"With India's focus on renewable energy and sustainable development, your problem-solving approach "
				"and interest in technology can drive the creation of green tech solutions, capitalizing on "
				"government initiatives like the National Solar Mission."
			),
		),
		CareerPath(
			title="Cross-Cultural Design Strategist",
			description=(
				"Your communication skills and cultural understanding position you to design user experiences for "
				"India's diverse market, especially valuable as Indian startups expand globally and international "
				"companies localize for India."
			),
		),
		CareerPath(
			title="Data-Driven Policy Analyst",
			description=(
				"Your analytical capabilities align with the growing need for evidence-based policymaking in India's "
				"digital governance initiatives, supporting smart city projects and digital transformation across "
				"government sectors."
			),
		),
		CareerPath(
			title="EdTech Innovation Specialist",
			description=(
				"Your problem-solving style and interest in technology make you perfect for revolutionizing "
				"education delivery in India, especially with the NEP 2020 emphasis on digital learning and skill "
				"development."
			),
		),
	],
)

"""Built-in sample quizzes used by the desktop player."""

from __future__ import annotations

from quiz_player.core.models import (
    MultiSelectQuestion,
    Quiz,
    QuizOption,
    QuizSettings,
    SingleChoiceQuestion,
    TypeInQuestion,
)


def _options(prefix: str, *entries: tuple[str, bool]) -> tuple[QuizOption, ...]:
    return tuple(
        QuizOption(id=f"{prefix}-{idx}", text=text, is_correct=is_correct)
        for idx, (text, is_correct) in enumerate(entries, start=1)
    )


TRIVIA_NIGHT = Quiz(
    id="trivia-night",
    title="Trivia Night",
    description="Test your general knowledge with these fun trivia questions!",
    questions=(
        SingleChoiceQuestion(
            id="trivia-capital-france",
            prompt="What is the capital of France?",
            hint="It's known as the City of Light",
            explanation="Paris is the capital and largest city of France, known for the Eiffel Tower.",
            options=_options(
                "trivia-capital-france",
                ("Paris", True),
                ("London", False),
                ("Berlin", False),
                ("Madrid", False),
            ),
        ),
        SingleChoiceQuestion(
            id="trivia-red-planet",
            prompt="Which planet is known as the Red Planet?",
            hint="Named after the Roman god of war",
            explanation="Mars appears red due to iron oxide (rust) on its surface.",
            options=_options(
                "trivia-red-planet",
                ("Mars", True),
                ("Venus", False),
                ("Jupiter", False),
                ("Saturn", False),
            ),
        ),
        SingleChoiceQuestion(
            id="trivia-wwii",
            prompt="In what year did World War II end?",
            hint="Same year the United Nations was founded",
            explanation="WWII ended in 1945 with the surrender of Japan in September.",
            options=_options(
                "trivia-wwii",
                ("1945", True),
                ("1944", False),
                ("1946", False),
                ("1943", False),
            ),
        ),
    ),
    settings=QuizSettings(shuffle_options=True),
)

MIXED_BAG = Quiz(
    id="mixed-bag",
    title="Mixed Bag",
    description="One of every question type, with hints and explanations.",
    questions=(
        SingleChoiceQuestion(
            id="mixed-radians",
            prompt="What is $30^\\circ$ in radians?",
            hint="A full turn is $2\\pi$.",
            explanation="$30^\\circ = \\frac{30}{180}\\pi = \\frac{\\pi}{6}$.",
            options=_options(
                "mixed-radians",
                ("$\\frac{\\pi}{2}$", False),
                ("$\\frac{\\pi}{6}$", True),
                ("$\\frac{\\pi}{3}$", False),
                ("$\\frac{\\pi}{4}$", False),
            ),
        ),
        MultiSelectQuestion(
            id="mixed-primes",
            prompt="Select **all** prime numbers.",
            hint="A prime has exactly two divisors.",
            explanation="2, 3 and 7 are prime; 9 = 3 x 3.",
            options=_options(
                "mixed-primes",
                ("2", True),
                ("3", True),
                ("7", True),
                ("9", False),
            ),
        ),
        TypeInQuestion(
            id="mixed-symbol",
            prompt="What is the chemical symbol for gold?",
            hint="From the Latin *aurum*.",
            explanation="Gold's symbol Au comes from the Latin word *aurum*.",
            expected_answer="Au",
        ),
    ),
    settings=QuizSettings(shuffle_options=True, show_hints=True, show_explanations=True),
)

SPEED_ROUND = Quiz(
    id="speed-round",
    title="Speed Round",
    description="Fifteen seconds per question, two minutes in total.",
    questions=(
        SingleChoiceQuestion(
            id="speed-add",
            prompt="$7 + 8 = ?$",
            options=_options("speed-add", ("15", True), ("14", False), ("16", False)),
        ),
        SingleChoiceQuestion(
            id="speed-multiply",
            prompt="$6 \\times 7 = ?$",
            options=_options("speed-multiply", ("36", False), ("42", True), ("48", False)),
        ),
        TypeInQuestion(
            id="speed-square",
            prompt="What is $12^2$?",
            expected_answer="144",
        ),
        MultiSelectQuestion(
            id="speed-even",
            prompt="Select the even numbers.",
            options=_options("speed-even", ("4", True), ("5", False), ("10", True), ("13", False)),
        ),
    ),
    settings=QuizSettings(
        shuffle_questions=True,
        timer_enabled=True,
        time_per_question=15,
        total_time_limit=120,
    ),
)

QUIZ_TEMPLATES: dict[str, Quiz] = {
    quiz.id: quiz for quiz in (TRIVIA_NIGHT, MIXED_BAG, SPEED_ROUND)
}


def get_template(template_id: str) -> Quiz:
    try:
        return QUIZ_TEMPLATES[template_id]
    except KeyError as exc:
        raise KeyError(f"Unknown quiz template '{template_id}'.") from exc

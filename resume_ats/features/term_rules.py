from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Literal

Verdict = Literal["accept", "reject"]

STOP_WORDS = frozenset(
    {
        "the", "and", "for", "are", "but", "not", "you", "all", "can", "with",
        "from", "have", "this", "that", "will", "your", "about", "which",
        "their", "said", "each", "she", "how", "been", "who", "called", "its",
        "would", "make", "like", "him", "into", "time", "has", "look", "two",
        "more", "write", "see", "number", "way", "could", "people", "our",
        "experience", "years", "work", "working", "build", "building",
        "develop", "developing", "create", "creating", "implement",
        "implementing", "collaborate", "collaborating", "participate",
        "participating", "integrate", "integrating", "optimize", "optimizing",
        "troubleshoot", "troubleshooting", "knowledge", "proficiency",
        "expertise", "familiarity", "understanding", "solid", "strong", "good",
        "excellent", "and/or", "e.g", "i.e", "etc", "we", "us", "what", "who",
        "why", "when", "where", "must", "should", "plus", "bonus", "nice",
        "built", "developed", "designed", "implemented", "led", "managed",
        "created", "improved", "reduced", "delivered", "using",
    }
)

GENERIC_WORDS = frozenset(
    {
        "description", "experience", "skills", "education", "work", "job",
        "company", "team", "role", "position", "responsibilities",
        "requirements", "qualifications", "candidate", "professional",
        "summary", "objective", "things", "stuff", "various", "multiple",
        "several", "many", "some", "good", "great", "excellent", "strong",
        "ability", "knowledge", "years", "required", "preferred", "must",
        "should", "will", "can", "seeking", "looking", "join", "growing",
        "field", "related", "degree", "salary", "perks", "benefits",
        "compensation", "location",
    }
)

QUALIFIER_PHRASES = (
    "strong proficiency", "strong expertise", "solid understanding",
    "good knowledge", "excellent skills", "proven experience",
    "deep understanding", "extensive experience", "broad knowledge",
    "strong background", "solid experience", "good understanding",
    "strong knowledge", "proven ability", "demonstrated ability",
    "strong skills", "good skills", "excellent knowledge",
    "years of experience", "experience with", "knowledge of",
    "proficiency in", "expertise in", "familiarity with",
    "understanding of", "background in", "skills in",
)
_QUALIFIER_WORDS = frozenset(word for phrase in QUALIFIER_PHRASES for word in phrase.split())

SUPER_GENERIC_PHRASES = (
    "years of experience", "our team", "your team", "required skills",
    "preferred skills", "qualifications", "responsibilities",
    "related field", "computer science", "bachelor degree",
    "communication skills", "problem solving", "excellent communication",
)

NOISE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"^(required|preferred|must|should|years?|months?|experiences?)$",
        r"^(responsibilities|qualifications|skills|education|work|job|role|position)$",
        r"^(knowledge|proficiency|expertise|familiarity|understanding|solid|strong)$",
        r"^(participate|participating|integrate|integrating|optimize|optimizing)$",
        r"^(troubleshoot|troubleshooting|collaborate|collaborating)$",
        r"^(implement|implementing|develop|developing|build|building|creating)$",
        r"growing team|our team|\bjoin\b|seeking|looking|candidate|\bideal\b",
        r"bachelor|degree|\bfield\b|related|computer science",
        r"^(and|with|the|for|from|plus|bonus)\s",
        r"^(party|third|high|best|technical|practices|issues|performance)$",
        r"^(stack|full|developer|applications|services|practices|operations)$",
        r"^[\d.,/+%#-]+[a-z]{0,2}$",
    )
)

TECH_CONTEXT_INDICATORS = (
    "language", "framework", "library", "tool", "technology", "platform",
    "database", "server", "cloud", "api", "using", "with", "including",
    "experience in", "proficiency", "knowledge of", "skills:", "technologies:",
    "stack:", "developed", "built", "implemented", "deployed",
)

KNOWN_SKILLS = frozenset(
    {
        "python", "java", "javascript", "typescript", "rust", "ruby",
        "php", "scala", "kotlin", "swift", "elixir", "c++", "c#", ".net",
        "sql", "nosql", "postgresql", "mysql", "mongodb", "redis", "oracle",
        "sqlite", "elasticsearch", "cassandra", "dynamodb", "snowflake",
        "react", "angular", "vue", "next.js", "node.js", "express.js",
        "django", "flask", "fastapi", "spring", "rails", "laravel",
        "docker", "kubernetes", "terraform", "ansible", "jenkins", "git",
        "github", "gitlab", "bitbucket", "aws", "azure", "gcp", "linux",
        "windows", "macos", "html", "css", "scss", "graphql", "grpc",
        "rest api", "api", "microservices", "kafka", "apache kafka",
        "apache spark", "hadoop", "airflow", "tableau", "power bi", "looker",
        "excel", "tensorflow", "pytorch", "keras", "scikit-learn", "pandas",
        "numpy", "jira", "confluence", "salesforce", "sap", "figma",
        "photoshop", "selenium", "cypress", "jest", "pytest", "junit",
        "agile", "scrum", "kanban", "devops", "ci/cd", "machine learning",
        "deep learning", "artificial intelligence",
        "natural language processing", "data science",
    }
)

_LIST_MARKER = re.compile(r"^(?:[-•*:·]|\d+[.)])")
_TRAILING_PUNCTUATION = re.compile(r"[.:,;!?]$")
_DIGIT = re.compile(r"\d")
_TECH_PUNCTUATION = re.compile(r"[.+#/]")
_ACRONYM = re.compile(r"^[A-Z]{2,6}$")
_MIXED_CASE = re.compile(r"^(?:[A-Z][a-z]+[A-Z]|[a-z]+[A-Z])")
_SENTENCE_START = re.compile(r"(?:^|[.!?])\s*[-•*·]?\s*$")

MIN_TERM_LENGTH = 3
MAX_TERM_LENGTH = 30
MAX_PHRASE_LENGTH = 50
MAX_PUNCTUATED_LENGTH = 20
CONTEXT_WINDOW = 50


@dataclass(frozen=True, slots=True)
class TermContext:
    """A candidate term as written in the source, plus what the rules need to judge it."""

    term: str
    source_text: str
    canonical: str
    is_phrase: bool = False

    @property
    def lowered(self) -> str:
        return self.term.lower()


@dataclass(frozen=True, slots=True)
class TermRule:
    name: str
    check: Callable[[TermContext], Verdict | None]


def _fragment(ctx: TermContext) -> Verdict | None:
    if not ctx.term or ctx.term != ctx.term.strip() or "  " in ctx.term:
        return "reject"
    return None


def _list_marker(ctx: TermContext) -> Verdict | None:
    return "reject" if _LIST_MARKER.match(ctx.term) else None


def _trailing_punctuation(ctx: TermContext) -> Verdict | None:
    return "reject" if _TRAILING_PUNCTUATION.search(ctx.term) else None


def _length_bounds(ctx: TermContext) -> Verdict | None:
    limit = MAX_PHRASE_LENGTH if ctx.is_phrase else MAX_TERM_LENGTH
    if len(ctx.term) > limit:
        return "reject"
    if len(ctx.canonical) < MIN_TERM_LENGTH:
        return "reject"
    return None


def _stop_word(ctx: TermContext) -> Verdict | None:
    return "reject" if ctx.lowered in STOP_WORDS else None


def _qualifier_phrase(ctx: TermContext) -> Verdict | None:
    lowered = ctx.lowered
    if any(phrase in lowered for phrase in QUALIFIER_PHRASES):
        return "reject"
    if not ctx.is_phrase and lowered in _QUALIFIER_WORDS:
        return "reject"
    return None


def _noise_pattern(ctx: TermContext) -> Verdict | None:
    return "reject" if any(pattern.search(ctx.term) for pattern in NOISE_PATTERNS) else None


def _generic_word(ctx: TermContext) -> Verdict | None:
    if ctx.lowered in GENERIC_WORDS:
        return "reject"
    return None


def _generic_phrase(ctx: TermContext) -> Verdict | None:
    if not ctx.is_phrase:
        return None
    lowered = ctx.lowered
    if any(phrase in lowered for phrase in SUPER_GENERIC_PHRASES):
        return "reject"
    words = lowered.split()
    generic_count = sum(1 for word in words if word in GENERIC_WORDS or word in STOP_WORDS)
    if generic_count > len(words) / 2:
        return "reject"
    return None


def _known_skill(ctx: TermContext) -> Verdict | None:
    if ctx.canonical in KNOWN_SKILLS or ctx.canonical != ctx.lowered:
        return "accept"
    return None


def _has_digit(ctx: TermContext) -> Verdict | None:
    return "accept" if _DIGIT.search(ctx.term) else None


def _technical_punctuation(ctx: TermContext) -> Verdict | None:
    if _TECH_PUNCTUATION.search(ctx.term) and len(ctx.term) < MAX_PUNCTUATED_LENGTH:
        return "accept"
    return None


def _acronym(ctx: TermContext) -> Verdict | None:
    words = ctx.term.split()
    return "accept" if any(_ACRONYM.match(word) for word in words) else None


def _mixed_case(ctx: TermContext) -> Verdict | None:
    words = ctx.term.split()
    return "accept" if any(_MIXED_CASE.match(word) for word in words) else None


def appears_capitalized_mid_sentence(term: str, text: str) -> bool:
    """True when ``term`` occurs capitalized somewhere other than a sentence or line start."""
    if not term or not text:
        return False
    capitalized = " ".join(word[:1].upper() + word[1:] for word in term.split())
    try:
        pattern = re.compile(rf"(?<![\w.+#-]){re.escape(capitalized)}(?![\w+#])")
    except re.error:
        return False
    for match in pattern.finditer(text):
        line_start = text.rfind("\n", 0, match.start()) + 1
        prefix = text[line_start : match.start()]
        if not _SENTENCE_START.search(prefix):
            return True
    return False


def near_technical_context(term: str, text: str, window: int = CONTEXT_WINDOW) -> bool:
    lowered_text = text.lower()
    index = lowered_text.find(term.lower())
    if index == -1:
        return False
    start = max(0, index - window)
    end = min(len(lowered_text), index + len(term) + window)
    context = lowered_text[start:end]
    return any(indicator in context for indicator in TECH_CONTEXT_INDICATORS)


def _capitalized_in_context(ctx: TermContext) -> Verdict | None:
    if appears_capitalized_mid_sentence(ctx.term, ctx.source_text) and near_technical_context(
        ctx.term, ctx.source_text
    ):
        return "accept"
    return None


TERM_RULES: tuple[TermRule, ...] = (
    TermRule("fragment", _fragment),
    TermRule("list_marker", _list_marker),
    TermRule("trailing_punctuation", _trailing_punctuation),
    TermRule("length_bounds", _length_bounds),
    TermRule("stop_word", _stop_word),
    TermRule("qualifier_phrase", _qualifier_phrase),
    TermRule("noise_pattern", _noise_pattern),
    TermRule("generic_word", _generic_word),
    TermRule("generic_phrase", _generic_phrase),
    TermRule("known_skill", _known_skill),
    TermRule("has_digit", _has_digit),
    TermRule("technical_punctuation", _technical_punctuation),
    TermRule("acronym", _acronym),
    TermRule("mixed_case", _mixed_case),
    TermRule("capitalized_in_context", _capitalized_in_context),
)


def evaluate_term(ctx: TermContext, rules: tuple[TermRule, ...] = TERM_RULES) -> tuple[Verdict, str | None]:
    """Run the rules in order; the first verdict wins. No verdict means reject."""
    for rule in rules:
        verdict = rule.check(ctx)
        if verdict is not None:
            return verdict, rule.name
    return "reject", None


def is_generic_word(word: str) -> bool:
    return (word or "").strip().lower() in GENERIC_WORDS

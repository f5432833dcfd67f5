import math
import re

MUSCLE_GROUP_KEYWORDS = {
    "chest": ["bench", "chest", "fly", "press"],
    "back": ["row", "pulldown", "lat", "pull"],
    "shoulders": ["shoulder", "lateral", "face pull", "press"],
    "biceps": ["curl", "bicep"],
    "triceps": ["tricep", "pushdown", "extension"],
    "legs": ["squat", "lunge", "leg", "deadlift", "thrust"],
    "calves": ["calf", "calves", "raise"],
    "abs": ["crunch", "abs", "plank", "woodchop"],
    "glutes": ["thrust", "squat", "lunge"],
    "quads": ["squat", "extension", "lunge"],
    "hamstrings": ["curl", "deadlift", "thrust"],
}

COMPOUND_KEYWORDS = ["squat", "deadlift", "bench", "row", "pulldown", "press", "thrust"]

MUSCLE_GROUP_COLORS = {
    "chest": "bg-blue-600",
    "back": "bg-purple-600",
    "shoulders": "bg-pink-600",
    "biceps": "bg-indigo-600",
    "triceps": "bg-cyan-600",
    "legs": "bg-green-600",
    "calves": "bg-orange-600",
    "abs": "bg-yellow-600",
    "glutes": "bg-red-600",
    "quads": "bg-emerald-600",
    "hamstrings": "bg-amber-600",
}
DEFAULT_GROUP_COLOR = "bg-gray-600"

EXERCISE_TYPE_COLORS = {
    "Compound": "bg-accent-green",
    "Isolation": "bg-red-500",
}

RPE_DESCRIPTIONS = {
    "RPE 6": "Easy - Could do many more reps",
    "RPE 7": "Moderately hard - Could do 3-4 more reps",
    "RPE 8": "Hard - Could do 2-3 more reps",
    "RPE 9": "Very hard - Could do 1-2 more reps",
    "RPE 10": "Maximum effort - Could not do another rep",
}

PROGRESS_STATES = {
    "ready": {"message": "Ready to increase", "color": "text-accent-green"},
    "in-progress": {"message": "Keep current weight", "color": "text-yellow-400"},
    "maintain": {"message": "No data", "color": "text-gray-400"},
}

MINUTES_PER_SET = 2
SETUP_MINUTES_PER_EXERCISE = 1
DURATION_BUFFER = 1.3

DEFAULT_TOP_REPS = 10
DEFAULT_BOTTOM_REPS = 8
DEFAULT_RPE = 8

_RANGE_RE = re.compile(r"(\d+)-(\d+)")
_NUMBER_RE = re.compile(r"(\d+)")
_RPE_RE = re.compile(r"RPE\s*(\d+)", re.IGNORECASE)


# ───────── Classification ─────────

def muscle_groups(exercise_name: str) -> set:
    """
    Muscle groups an exercise works, by keyword match on its name.

    Groups overlap: "Hip Thrust" is legs, glutes and hamstrings.
    """
    name = exercise_name.lower()
    return {
        group
        for group, keywords in MUSCLE_GROUP_KEYWORDS.items()
        if any(keyword in name for keyword in keywords)
    }


def exercise_type(exercise_name: str) -> str:
    name = exercise_name.lower()
    if any(keyword in name for keyword in COMPOUND_KEYWORDS):
        return "Compound"
    return "Isolation"


def muscle_group_color(group: str) -> str:
    return MUSCLE_GROUP_COLORS.get(group, DEFAULT_GROUP_COLOR)


def exercise_badges(exercise_name: str):
    """Display badges: one per muscle group (in mapping order), then the type badge."""
    groups = muscle_groups(exercise_name)
    badges = [
        {"label": group.capitalize(), "color": muscle_group_color(group)}
        for group in MUSCLE_GROUP_KEYWORDS
        if group in groups
    ]
    kind = exercise_type(exercise_name)
    badges.append({"label": kind, "color": EXERCISE_TYPE_COLORS[kind]})
    return badges


def count_unique_muscle_groups(exercises) -> int:
    groups = set()
    for exercise in exercises:
        groups |= muscle_groups(exercise.name)
    return len(groups)


# ───────── Rep ranges and progression ─────────

def extract_top_rep_range(rep_range: str) -> int:
    """Top of a rep range: "8-12" -> 12, "15" -> 15, "" -> 10."""
    match = _RANGE_RE.search(rep_range)
    if match:
        return int(match.group(2))
    single = _NUMBER_RE.search(rep_range)
    return int(single.group(1)) if single else DEFAULT_TOP_REPS


def extract_bottom_rep_range(rep_range: str) -> int:
    """Bottom of a rep range: "8-12" -> 8, "15" -> 15, "" -> 8."""
    match = _RANGE_RE.search(rep_range)
    if match:
        return int(match.group(1))
    single = _NUMBER_RE.search(rep_range)
    return int(single.group(1)) if single else DEFAULT_BOTTOM_REPS


def recorded_sets(exercise) -> list:
    return [s for s in (exercise.completed_sets or []) if s is not None]


def is_ready_for_progression(exercise) -> bool:
    logged = recorded_sets(exercise)
    if not logged:
        return False
    top = extract_top_rep_range(exercise.reps)
    return all(s.reps >= top for s in logged)


def progress_status(exercise) -> dict:
    if is_ready_for_progression(exercise):
        status = "ready"
    elif recorded_sets(exercise):
        status = "in-progress"
    else:
        status = "maintain"
    return {"status": status, **PROGRESS_STATES[status]}


# ───────── Duration estimates ─────────

def workout_duration(exercises) -> dict:
    """Per-set estimate: 2 min per set plus 1 min setup per exercise, +30% for the upper bound."""
    total_sets = sum(e.sets for e in exercises)
    minimum = math.ceil(total_sets * MINUTES_PER_SET + len(exercises) * SETUP_MINUTES_PER_EXERCISE)
    return {"min": minimum, "max": math.ceil(minimum * DURATION_BUFFER)}


def estimated_time_range(exercise_count: int) -> dict:
    # Day-summary estimate, independent of workout_duration:
    # 5 min per exercise plus 2 min rest, with a flat 15 min band.
    total = exercise_count * 5 + exercise_count * 2
    return {"min": total, "max": total + 15}


def format_time_range(estimate: dict) -> str:
    return f"{estimate['min']}-{estimate['max']}"


# ───────── Display helpers ─────────

def parse_rpe(rpe: str) -> int:
    match = _RPE_RE.search(rpe or "")
    return int(match.group(1)) if match else DEFAULT_RPE


def describe_rpe(rpe: str) -> str:
    return RPE_DESCRIPTIONS.get(f"RPE {parse_rpe(rpe)}", "")


def format_weight(weight) -> str:
    if not weight or not weight.strip():
        return "Add weight"
    return weight


def workout_day_title(day_number: int, title: str, focus: str) -> str:
    return f"Day {day_number} - {title} ({focus})"


# ───────── Day summary view ─────────

def day_summary(day, exercises) -> dict:
    """Everything the day overview shows, computed from one day and its exercises."""
    return {
        "id": day.id,
        "fullTitle": workout_day_title(day.day_number, day.title, day.focus),
        "exerciseCount": len(exercises),
        "totalSets": sum(e.sets for e in exercises),
        "duration": workout_duration(exercises),
        "estimatedTime": format_time_range(estimated_time_range(len(exercises))),
        "muscleGroupCount": count_unique_muscle_groups(exercises),
        "exercises": [
            {
                "id": e.id,
                "name": e.name,
                "badges": exercise_badges(e.name),
                "progress": progress_status(e),
                "weight": format_weight(e.current_weight),
                "rpeDescription": describe_rpe(e.rpe),
            }
            for e in exercises
        ],
    }

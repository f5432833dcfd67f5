DEFAULT_WORKOUT_DAYS = [
    {"day_number": 1, "title": "Upper Body", "focus": "Horizontal Focus"},
    {"day_number": 2, "title": "Lower + Core", "focus": "Variation A"},
    {"day_number": 3, "title": "Upper Body", "focus": "Vertical/Back Focus"},
    {"day_number": 4, "title": "Lower + Core", "focus": "Variation B"},
    {"day_number": 5, "title": "Full-Body", "focus": "Pump + Core"},
]


def _ex(name, sets, reps, rpe, rule, video, order):
    return {
        "name": name,
        "sets": sets,
        "reps": reps,
        "rpe": rpe,
        "progression_rule": rule,
        "video_url": video,
        "order": order,
    }


# Keyed by day_number
DEFAULT_EXERCISES = {
    1: [
        _ex("Dumbbell Bench Press", 4, "6-10", "RPE 7-8",
            "When all 4 sets hit 10 reps for 2 workouts → +5 lb per dumbbell",
            "https://www.youtube.com/shorts/8RGZJKLcATU", 1),
        _ex("One-Arm Dumbbell Row (each side)", 3, "8-12", "RPE 7-8",
            "Top of range for 2 workouts → +5 lb per dumbbell",
            "https://www.youtube.com/shorts/haDEmdUKfrs", 2),
        _ex("Seated Dumbbell Shoulder Press", 3, "8-12", "RPE 7-8",
            "Top of range for 2 workouts → +5 lb per dumbbell",
            "https://www.youtube.com/shorts/E9ShwbwZ1zw", 3),
        _ex("Cable Chest Fly (mid height)", 3, "12-15", "RPE ~8",
            "When all sets reach 15 reps → next cable plate (~5 lb)",
            "https://www.youtube.com/shorts/xDVD1Cy3Nqs", 4),
        _ex("Face Pull (rope)", 3, "12-15", "RPE ~8",
            "When all sets hit 15 reps → next cable plate (~5 lb)",
            "https://www.youtube.com/shorts/Et3eTWO2kQE", 5),
        _ex("Dumbbell Preacher Curl", 3, "10-15", "RPE 7-8",
            "When you get 15 reps on all sets → +2.5-5 lb per dumbbell",
            "https://www.youtube.com/shorts/54kF4fR-ObE", 6),
        _ex("Cable Triceps Pushdown (rope)", 3, "10-15", "RPE 7-8",
            "When you reach 15 reps on all sets → next cable plate (~5 lb)",
            "https://www.youtube.com/shorts/Hn7An4PDLYQ", 7),
        _ex("Cable Crunch (abs)", 3, "12-15", "RPE 7-8",
            "When you hit 15 reps comfortably → next cable plate (~5 lb)",
            "https://www.youtube.com/shorts/dkGwcfo9zto", 8),
    ],
    2: [
        _ex("Goblet Squat", 4, "8-12", "RPE 7-8",
            "When all sets reach 12 reps twice → +5 lb (next dumbbell/plate)",
            "https://www.youtube.com/shorts/EUrU0HcPkQ8", 1),
        _ex("Dumbbell Romanian Deadlift", 3, "8-12", "RPE 7-8",
            "When all sets reach 12 reps twice → +5-10 lb total",
            "https://www.youtube.com/shorts/uYIlkIHksyk", 2),
        _ex("Bulgarian Split Squat (each leg)", 3, "8-12", "RPE 7-8",
            "When all sets reach 12 reps → +5 lb per dumbbell",
            "https://www.youtube.com/shorts/Us52wOAui2Q", 3),
        _ex("Leg Extension (bench attachment)", 3, "12-15", "RPE ~8",
            "When sets hit 15 reps → next plate (~5 lb)",
            "https://www.youtube.com/shorts/dNMUtQ6Fy4U", 4),
        _ex("Lying Leg Curl (bench attachment)", 3, "12-15", "RPE ~8",
            "When sets hit 15 reps → next plate (~5 lb)",
            "https://www.youtube.com/shorts/d6sg829PgNs", 5),
        _ex("Standing Calf Raise (dumbbells)", 3, "12-20", "RPE ~8",
            "When sets hit 20 reps → +5 lb per dumbbell",
            "https://www.youtube.com/shorts/PQ-F5uzxipQ", 6),
        _ex("Reverse Crunch on Bench (abs)", 3, "12-15", "Bodyweight",
            "When 3x15 is easy → add reps up to 20 or hold a light (5 lb) plate between knees",
            "https://www.youtube.com/shorts/eAdyaHlaCiU", 7),
    ],
    3: [
        _ex("Lat Pulldown (cable)", 4, "8-12", "RPE 7-8",
            "When all sets hit 12 reps → next cable plate (~5 lb)",
            "https://www.youtube.com/shorts/EoWI90clb-0", 1),
        _ex("Incline Dumbbell Bench Press", 3, "8-12", "RPE 7-8",
            "When all sets hit 12 reps → +5 lb per dumbbell",
            "https://www.youtube.com/watch?v=PZecKOpWOrk", 2),
        _ex("Seated Cable Row (close/neutral grip)", 3, "8-12", "RPE 7-8",
            "When all sets hit 12 reps → next cable plate (~5 lb)",
            "https://www.youtube.com/shorts/lOetNpBFChY", 3),
        _ex("Dumbbell Lateral Raise", 3, "12-15", "RPE ~8",
            "When all sets hit 15 reps → +2.5 lb per dumbbell",
            "https://www.youtube.com/shorts/O1VrfbSFYLA", 4),
        _ex("Hammer Curl (dumbbells)", 3, "10-15", "RPE 7-8",
            "When all sets hit 15 reps → +2.5-5 lb per dumbbell",
            "https://www.youtube.com/watch?v=wzQFTrlcDlg", 5),
        _ex("Overhead Rope Triceps Extension", 3, "10-15", "RPE 7-8",
            "When sets hit 15 reps → next cable plate (~5 lb)",
            "https://www.youtube.com/shorts/8dV3ZHUdPW0", 6),
        _ex("Pallof Press (anti-rotation, each side)", 3, "10-12/side", "RPE ~8",
            "When all sets hit 12/side → next cable plate (~5 lb)",
            "https://www.youtube.com/shorts/IgQE_DKZEIc", 7),
    ],
    4: [
        _ex("Dumbbell Hip Thrust", 4, "8-12", "RPE 7-8",
            "When all sets hit 12 reps → +10 lb total",
            "https://www.youtube.com/shorts/QqtLsnNthbA", 1),
        _ex("Cyclist Squat (heels elevated, goblet)", 3, "10-15", "RPE ~8",
            "When sets hit 15 reps → +5 lb",
            "https://www.youtube.com/shorts/US8zFTTV2bY", 2),
        _ex("Step-Up (dumbbells, each leg)", 3, "8-12/leg", "RPE 7-8",
            "When sets hit 12/leg → +5 lb per dumbbell",
            "https://www.youtube.com/shorts/CYQ0qNAXDOM", 3),
        _ex("Single-Leg Romanian Deadlift (dumbbell)", 3, "8-12/leg", "RPE 7-8",
            "When sets hit 12/leg → +5 lb per dumbbell",
            "https://www.youtube.com/shorts/8sFky7C7q2A", 4),
        _ex("Seated Calf Raise (dumbbell on knees)", 3, "12-20", "RPE ~8",
            "When sets hit 20 reps → +5-10 lb total",
            "https://www.youtube.com/shorts/Ii1Qo44GasM", 5),
        _ex("Forearm Plank", 3, "45-60 sec hold", "Bodyweight",
            "When 60s is easy → add +10-20 lb plate on back or progress to harder variation",
            "https://www.youtube.com/shorts/E-PBfoIMc-0", 6),
        _ex("Cable Woodchop (each side)", 3, "10-15/side", "RPE ~8",
            "When sets hit 15/side → next plate (~5 lb)",
            "https://www.youtube.com/shorts/p4vXA60_D6A", 7),
    ],
    5: [
        _ex("Goblet Squat (moderate pace)", 3, "12-15", "RPE ~8",
            "When sets hit 15 reps → +5 lb",
            "https://www.youtube.com/shorts/EUrU0HcPkQ8", 1),
        _ex("Dumbbell Romanian Deadlift (moderate)", 3, "10-12", "RPE 7-8",
            "When sets hit 12 reps → +5-10 lb total",
            "https://www.youtube.com/shorts/uYIlkIHksyk", 2),
        _ex("Single-Arm Cable Row (each side)", 3, "8-12/side", "RPE 7-8",
            "When sets hit 12/side → next cable plate (~5 lb)",
            "https://www.youtube.com/shorts/1CV_vvYBEbA", 3),
        _ex("Cable Lateral Raise", 3, "12-15", "RPE ~8",
            "When sets hit 15 reps → next plate (~5 lb)",
            "https://www.youtube.com/shorts/HCfU6LGpgMk", 4),
        _ex("Alternating Dumbbell Curl", 3, "10-15/arm", "RPE 7-8",
            "When sets hit 15/arm → +2.5-5 lb per dumbbell",
            "https://www.youtube.com/shorts/FHY_2t7R714", 5),
        _ex("Cable Triceps Pushdown", 3, "10-15", "RPE 7-8",
            "When sets hit 15 reps → next plate (~5 lb)",
            "https://www.youtube.com/shorts/1FjkhpZsaxc", 6),
        _ex("Weighted Decline Crunch", 3, "10-15", "RPE ~8",
            "When sets hit 15 reps → +2.5-5 lb",
            "https://www.youtube.com/shorts/T24Vji_gEaQ", 7),
    ],
}


def seed_plan(storage):
    """Load the starter plan into an empty store. Returns the created days."""
    days = []
    for day_data in DEFAULT_WORKOUT_DAYS:
        day = storage.create_day(day_data)
        for exercise_data in DEFAULT_EXERCISES[day.day_number]:
            storage.create_exercise({**exercise_data, "workout_day_id": day.id})
        days.append(day)
    return days

from coffee_helper.domain.models import (
    GENERIC,
    Guide,
    GuideStep,
    Machine,
    Option,
    Question,
    Solution,
)

# ==============================================================================
# MACHINES
# ==============================================================================

COFFEE_MACHINES = [
    Machine(id="machine-001", brand="Breville", model="Barista Express"),
    Machine(id="machine-002", brand="DeLonghi", model="Magnifica"),
    Machine(id="machine-003", brand="Gaggia", model="Classic Pro"),
    Machine(id="machine-004", brand=GENERIC, model="Espresso Pro"),
]

# ==============================================================================
# INSTRUCTION GUIDES
# ==============================================================================

guide_001 = Guide(
    id="guide-001",
    title="Daily Cleaning Routine for Breville Barista Express",
    category="Cleaning",
    machine_brand="Breville",
    machine_model="Barista Express",
    summary="Learn the essential daily cleaning steps to keep your Breville Barista Express in top condition.",
    image_url="https://picsum.photos/seed/guide1/400/300",
    steps=[
        GuideStep(title="Flush Group Head", description="Run water through the group head to remove coffee grounds."),
        GuideStep(title="Clean Portafilter", description="Wipe the portafilter basket clean after each use."),
        GuideStep(
            title="Purge Steam Wand",
            description="Purge and wipe the steam wand immediately after frothing milk.",
            image_url="https://picsum.photos/seed/steamwand/300/200",
        ),
    ],
    tools=["Cleaning brush", "Microfiber cloth"],
    safety_alerts=["Ensure machine is cooled down before cleaning steam wand tip."],
)

guide_002 = Guide(
    id="guide-002",
    title="Descale Your DeLonghi Magnifica",
    category="Maintenance",
    machine_brand="DeLonghi",
    machine_model="Magnifica",
    summary="A step-by-step guide to descaling your DeLonghi Magnifica for optimal performance and longevity.",
    image_url="https://picsum.photos/seed/guide2/400/300",
    steps=[
        GuideStep(title="Prepare Descaling Solution", description="Mix the descaling solution according to the manufacturer's instructions."),
        GuideStep(
            title="Run Descaling Cycle",
            description="Follow your machine's specific descaling cycle instructions.",
            video_url="https://www.youtube.com/embed/exampleVideoID",
        ),
        GuideStep(title="Rinse Thoroughly", description="Run several tanks of fresh water through the machine to rinse."),
    ],
    tools=["DeLonghi descaler", "Large container"],
)

guide_003 = Guide(
    id="guide-003",
    title="Fixing Low Pressure on Gaggia Classic Pro",
    category="Repair",
    machine_brand="Gaggia",
    machine_model="Classic Pro",
    summary="Troubleshoot and fix common causes of low brew pressure on your Gaggia Classic Pro.",
    image_url="https://picsum.photos/seed/guide3/400/300",
    steps=[
        GuideStep(title="Check Coffee Grind", description="Ensure your coffee grind is not too coarse."),
        GuideStep(title="Clean Shower Screen", description="A clogged shower screen can reduce pressure. Unscrew and clean it."),
        GuideStep(
            title="Inspect Pump (Advanced)",
            description="If other steps fail, the pump may need inspection or replacement. This may require professional help.",
        ),
    ],
    tools=["Screwdriver", "Brush"],
    safety_alerts=["Unplug the machine before attempting any internal repairs."],
)

guide_004 = Guide(
    id="guide-004",
    title="Basic Espresso Machine Maintenance",
    category="Maintenance",
    machine_brand=GENERIC,
    machine_model="Espresso Pro",
    summary="General maintenance tips applicable to most espresso machines.",
    image_url="https://picsum.photos/seed/guide4/400/300",
    steps=[
        GuideStep(title="Daily Wipe Down", description="Wipe the exterior of the machine daily."),
        GuideStep(title="Backflush (if applicable)", description="Perform a backflush routine if your machine supports it."),
        GuideStep(title="Check Water Reservoir", description="Regularly clean the water reservoir to prevent buildup."),
    ],
    tools=["Microfiber cloth", "Blind basket (for backflushing)"],
)

guide_005 = Guide(
    id="guide-005",
    title="Replacing a Group Head Gasket",
    category="Repair",
    machine_brand=GENERIC,
    machine_model=GENERIC,
    summary="How to remove a worn group head gasket and fit a new one on most espresso machines.",
    steps=[
        GuideStep(title="Cool Down and Unplug", description="Let the machine cool completely and unplug it."),
        GuideStep(title="Remove Shower Screen", description="Unscrew the shower screen and pry out the old gasket."),
        GuideStep(title="Fit New Gasket", description="Press the new gasket evenly into the group head, bevel facing down."),
    ],
    tools=["Screwdriver", "Pick tool"],
    safety_alerts=["Never work on the group head while the machine is hot."],
)

INSTRUCTION_GUIDES = [guide_001, guide_002, guide_003, guide_004, guide_005]

# ==============================================================================
# TROUBLESHOOTING TREE
# ==============================================================================

# --- ENTRY POINT ---
symptom_start = Question(
    id="symptom-start",
    text="What problem are you experiencing with your coffee machine?",
    options=[
        Option(text="Machine is leaking water", next_step_id="q-leak-location"),
        Option(text="No coffee coming out", next_step_id="q-no-coffee-water"),
        Option(text="Coffee tastes bad", next_step_id="q-bad-taste-type"),
        Option(text="Machine not turning on", next_step_id="sol-power-check"),
    ],
)

# --- LEAKS ---
q_leak_location = Question(
    id="q-leak-location",
    text="Where is the machine leaking from?",
    options=[
        Option(text="Group head", next_step_id="sol-leak-grouphead"),
        Option(text="Steam wand", next_step_id="sol-leak-steamwand"),
        Option(text="Underneath the machine", next_step_id="sol-leak-underneath"),
    ],
)

sol_leak_grouphead = Solution(
    id="sol-leak-grouphead",
    title="Leaking Group Head",
    description=(
        "A leaking group head is often due to a worn-out group head gasket. "
        "Consider replacing it."
    ),
    guide_id="guide-005",
)

sol_leak_steamwand = Solution(
    id="sol-leak-steamwand",
    title="Leaking Steam Wand",
    description=(
        "Drips from the steam wand usually mean the valve seal is worn or milk residue "
        "is keeping it from closing. Purge and clean the wand after every use."
    ),
    guide_id="guide-001",
)

sol_leak_underneath = Solution(
    id="sol-leak-underneath",
    title="Leak Underneath the Machine",
    description=(
        "Water under the machine can come from a cracked reservoir, a loose internal hose "
        "or an overflowing drip tray. Check the tray and reservoir first."
    ),
    professional_help=True,
)

# --- NO COFFEE ---
q_no_coffee_water = Question(
    id="q-no-coffee-water",
    text="Is water flowing through the group head when you try to brew (without portafilter)?",
    options=[
        Option(text="Yes, water flows", next_step_id="sol-no-coffee-grind-tamp"),
        Option(text="No, water does not flow or very little", next_step_id="sol-no-coffee-blockage"),
    ],
)

sol_no_coffee_grind_tamp = Solution(
    id="sol-no-coffee-grind-tamp",
    title="Check Grind and Tamp",
    description=(
        "If water flows but no coffee, your coffee grind might be too fine or you might be "
        "tamping too hard, choking the machine. Try a coarser grind or lighter tamp."
    ),
    guide_id="guide-003",
)

sol_no_coffee_blockage = Solution(
    id="sol-no-coffee-blockage",
    title="Potential Blockage or Pump Issue",
    description=(
        "If no water flows, there might be a blockage in the water line, a pump issue, or the "
        "machine needs descaling. Try descaling first. If the issue persists, it might require "
        "professional help or checking the pump."
    ),
    guide_id="guide-002",
    professional_help=True,
)

# --- BAD TASTE ---
q_bad_taste_type = Question(
    id="q-bad-taste-type",
    text="How would you describe the bad taste?",
    options=[
        Option(text="Bitter or burnt", next_step_id="sol-bad-taste-bitter"),
        Option(text="Sour or acidic", next_step_id="sol-bad-taste-sour"),
        Option(text="Metallic or stale", next_step_id="sol-bad-taste-stale"),
    ],
)

sol_bad_taste_bitter = Solution(
    id="sol-bad-taste-bitter",
    title="Bitter Coffee",
    description=(
        "Bitter coffee can be due to over-extraction (grind too fine, brew time too long), "
        "water too hot, or stale/over-roasted beans. Also, ensure your machine is clean."
    ),
    guide_id="guide-001",
)

sol_bad_taste_sour = Solution(
    id="sol-bad-taste-sour",
    title="Sour Coffee",
    description=(
        "Sour coffee is usually under-extracted: grind finer, dose a little more, or let the "
        "machine warm up fully before brewing."
    ),
)

sol_bad_taste_stale = Solution(
    id="sol-bad-taste-stale",
    title="Metallic or Stale Taste",
    description=(
        "A metallic or stale taste points to scale build-up or old water in the reservoir. "
        "Descale the machine and refill with fresh water."
    ),
    guide_id="guide-004",
)

# --- POWER ---
sol_power_check = Solution(
    id="sol-power-check",
    title="Machine Not Turning On",
    description=(
        "Ensure the machine is properly plugged into a working power outlet. Check the power "
        "cord for damage. If it still doesn't turn on, there might be an internal electrical "
        "issue requiring professional service."
    ),
    professional_help=True,
)

TROUBLESHOOT_STEPS = [
    symptom_start,
    q_leak_location,
    sol_leak_grouphead,
    sol_leak_steamwand,
    sol_leak_underneath,
    q_no_coffee_water,
    sol_no_coffee_grind_tamp,
    sol_no_coffee_blockage,
    q_bad_taste_type,
    sol_bad_taste_bitter,
    sol_bad_taste_sour,
    sol_bad_taste_stale,
    sol_power_check,
]

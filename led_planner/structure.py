# led_planner/structure.py
# Groundstack concept rules (non-engineering).

GOALPOST_MAX_M2 = 12
TOWERS_MAX_M2 = 30


def structure_suggestion(area_m2):
    if area_m2 <= GOALPOST_MAX_M2:
        return "Groundstack: basic goalpost (2 towers + header). Confirm base size/ballast/wind."
    if area_m2 <= TOWERS_MAX_M2:
        return ("Groundstack: towers + substantial header (consider mid support if wide). "
                "Confirm deflection/ballast/wind.")
    return "Recommend engineered support (stage roof / superstructure). Engage rigger/engineer."

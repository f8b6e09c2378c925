# led_planner/processors.py
# Video processor selection.

import logging

from led_planner.specs import PROCESSORS, get_processor

logger = logging.getLogger(__name__)

AUTO = "AUTO"


def select_processor(proc_mode, total_pixels, processors=None):
    """
    Returns the processor to plan with, or None.

    A fixed id is returned as-is (capacity is judged later by the port plan).
    AUTO picks the smallest unit whose total pixel capacity covers the wall.
    """
    table = PROCESSORS if processors is None else processors

    if proc_mode != AUTO:
        return get_processor(proc_mode, table)

    ordered = sorted(table.values(), key=lambda p: p.max_pixels_total)
    candidates = [p for p in ordered if total_pixels <= p.max_pixels_total]
    if not candidates:
        logger.warning("No processor fits %s px", f"{total_pixels:,}")
        return None
    return candidates[0]

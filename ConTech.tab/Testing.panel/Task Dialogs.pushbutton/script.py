# -*- coding: utf-8 -*-
# ======================================================================
"""Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder."""
# ======================================================================

# Imports
# ==================================================
from task_dialog import demo_all_variants, show_exception_dialog

# Button info
# ===================================================
__title__ = "Task Dialogs"
__doc__ = """
Shows every task dialog variant the extension uses, ending with a
simulated exception and its log file.
"""

# Main Code
# ==================================================
try:
    demo_all_variants()
except Exception as ex:
    show_exception_dialog("Unhandled Error", ex)

# -*- coding: utf-8 -*-
"""=========================================================================
Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder.
========================================================================="""


def print_rotation_summary(output, results):
    """Print each rotated element with its rotation, as printed by Parallel."""
    if not results:
        output.print_md("## No elements were rotated.")
        return

    output.print_md("# Parallel Rotation Summary")
    for i, result in enumerate(results, start=1):
        output.print_md(
            "### No: {:03} | ID: {} | Rotation: {:.2f} degrees".format(
                i,
                output.linkify(result.element_id),
                result.degrees,
            ))

    output.print_md("---")
    output.print_md("# Total elements: {:03} | {}".format(
        len(results), output.linkify([r.element_id for r in results])))


def print_transition_report(output, updated, skipped, missing=()):
    """Print updated transitions as (id, type name, length).

    skipped are ids no standard length keeps within the face angle limit,
    missing are ids whose family has no type for the length they need.
    """
    output.print_md("# Transition Length")
    for i, (element_id, type_name, length) in enumerate(updated, start=1):
        output.print_md(
            "### No: {:03} | ID: {} | Type: {} | Length: {}\"".format(
                i, output.linkify(element_id), type_name, length))

    if skipped:
        output.print_md("---")
        output.print_md(
            "## Not updated, exceeding the face angle limit: {}".format(
                output.linkify(list(skipped))))

    if missing:
        output.print_md("---")
        output.print_md(
            "## Not updated, no type for the required length: {}".format(
                output.linkify(list(missing))))

    output.print_md("---")
    output.print_md("# Updated: {:03} | Skipped: {:03} | No type: {:03}".format(
        len(updated), len(skipped), len(missing)))

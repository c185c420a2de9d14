# -*- coding: utf-8 -*-
"""=========================================================================
Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder.
========================================================================="""

# Imports
# =========================================================================
from exception_log import write_exception_log, inner_message
from enum import Enum
import logging
import webbrowser

# Global Variables
# =========================================================================
log = logging.getLogger("TaskDialog")

MAX_COMMAND_LINKS = 4
COMMAND_LINKS = ("CommandLink1", "CommandLink2", "CommandLink3", "CommandLink4")


def _host_ui():
    # Revit UI assemblies only exist inside the host
    from Autodesk.Revit import UI
    return UI


# Dialog Icon
# =========================================================================
class DialogIcon(Enum):
    NONE = "TaskDialogIconNone"
    ERROR = "TaskDialogIconError"
    WARNING = "TaskDialogIconWarning"
    INFORMATION = "TaskDialogIconInformation"
    SHIELD = "TaskDialogIconShield"

    def to_host(self, ui=None):
        ui = ui or _host_ui()
        return getattr(ui.TaskDialogIcon, self.value)


# Builder
# =========================================================================
class TaskDialogBuilder:
    """Fluent builder around the host TaskDialog.

    Example:
        TaskDialogBuilder("Save Changes", "Would you like to save?") \\
            .with_icon(DialogIcon.WARNING) \\
            .add_command_link("Save", on_save) \\
            .add_command_link("Don't Save", None) \\
            .show()
    """

    def __init__(self, title, main_instruction):
        if title is None:
            raise ValueError("title is required")
        if main_instruction is None:
            raise ValueError("main_instruction is required")
        self.title = title
        self.main_instruction = main_instruction
        self.main_content = ""
        self.icon = DialogIcon.NONE
        self.cancellable = True
        self.command_links = []

    def with_content(self, content):
        self.main_content = content or ""
        return self

    def with_icon(self, icon):
        self.icon = icon
        return self

    def add_command_link(self, text, action=None):
        """Add a link button; blank text and links past the fourth are ignored."""
        if len(self.command_links) >= MAX_COMMAND_LINKS:
            log.debug("Ignoring command link '%s', dialog already has %d",
                      text, MAX_COMMAND_LINKS)
            return self
        if not text or not text.strip():
            return self
        self.command_links.append((COMMAND_LINKS[len(self.command_links)], text, action))
        return self

    def allow_cancellation(self, allow):
        self.cancellable = bool(allow)
        return self

    def dispatch(self, index):
        """Run the action of the zero-based command link index, if any."""
        if 0 <= index < len(self.command_links):
            action = self.command_links[index][2]
            if action is not None:
                action()
                return True
        return False

    def build(self, ui=None):
        ui = ui or _host_ui()
        dialog = ui.TaskDialog(self.title)
        dialog.TitleAutoPrefix = False
        dialog.MainInstruction = self.main_instruction
        dialog.MainContent = self.main_content
        dialog.AllowCancellation = self.cancellable
        dialog.MainIcon = self.icon.to_host(ui)

        for link_name, text, _ in self.command_links:
            dialog.AddCommandLink(getattr(ui.TaskDialogCommandLinkId, link_name), text)

        if not self.command_links:
            dialog.CommonButtons = ui.TaskDialogCommonButtons.Ok
        return dialog

    def show(self):
        ui = _host_ui()
        result = self.build(ui).Show()

        for index, link_name in enumerate(COMMAND_LINKS[:len(self.command_links)]):
            if result == getattr(ui.TaskDialogResult, link_name):
                self.dispatch(index)
                break
        return result


# Shortcuts
# =========================================================================
def show_message(title, instruction, content=None, icon=DialogIcon.NONE):
    TaskDialogBuilder(title, instruction).with_content(content).with_icon(icon).show()


def ask_yes_no(title, instruction, content=None):
    """Yes/No dialog defaulting to No. True when the user picks Yes."""
    ui = _host_ui()
    dialog = ui.TaskDialog(title)
    dialog.MainInstruction = instruction
    dialog.MainContent = content or ""
    dialog.CommonButtons = ui.TaskDialogCommonButtons.Yes | ui.TaskDialogCommonButtons.No
    dialog.DefaultButton = ui.TaskDialogResult.No
    return dialog.Show() == ui.TaskDialogResult.Yes


def open_log_file(path):
    if not webbrowser.open(path):
        raise OSError("No application available to open {}".format(path))


def show_exception_dialog(title, exc, icon=DialogIcon.ERROR):
    """Write a detailed log for exc and show it with an option to open the log."""
    log.error("%s: %s", title, exc, exc_info=exc)
    instruction = str(exc) or type(exc).__name__
    caused_by = inner_message(exc)
    if caused_by:
        instruction += "\n" + caused_by

    try:
        path = write_exception_log(exc)
    except OSError as ex:
        TaskDialogBuilder("Log File Error", "Could not write log file:\n{}".format(ex)) \
            .with_icon(DialogIcon.ERROR) \
            .show()
        path = None

    def _open():
        try:
            open_log_file(path)
        except Exception as open_ex:
            TaskDialogBuilder("Error Opening Log File", str(open_ex)) \
                .with_icon(DialogIcon.ERROR) \
                .show()

    builder = TaskDialogBuilder(title, instruction).with_icon(icon)
    if path:
        builder.with_content(
            "A detailed error log has been saved to:\n{}\n\n"
            "Do you want to open the log file now?".format(path))
        builder.add_command_link("Open log file", _open)
        builder.add_command_link("Close", None)
    builder.show()
    return path


def demo_all_variants():
    """Show every dialog variant the builder supports."""
    TaskDialogBuilder("Basic Dialog", "First test.") \
        .with_content("This is a basic dialog with a title and a message.") \
        .show()

    TaskDialogBuilder("Info", "Operation Successful") \
        .with_content("The operation was completed without any errors.") \
        .with_icon(DialogIcon.INFORMATION) \
        .show()

    TaskDialogBuilder("Warning", "Unusual Behavior Detected") \
        .with_content("Please check your input values.") \
        .with_icon(DialogIcon.WARNING) \
        .show()

    TaskDialogBuilder("Critical Error", "An exception has occurred") \
        .with_content("A severe error has caused the process to stop.") \
        .with_icon(DialogIcon.ERROR) \
        .show()

    TaskDialogBuilder("Permission Required", "Administrator Access Needed") \
        .with_content("You must be an administrator to perform this action.") \
        .with_icon(DialogIcon.SHIELD) \
        .show()

    TaskDialogBuilder("Save Changes", "Would you like to save your changes?") \
        .with_content("Unsaved changes will be lost if you don't save.") \
        .with_icon(DialogIcon.WARNING) \
        .add_command_link("Save", lambda: show_message(
            "Saved", "Your changes have been saved.", icon=DialogIcon.INFORMATION)) \
        .add_command_link("Don't Save", lambda: show_message(
            "Not Saved", "Your changes were discarded.", icon=DialogIcon.WARNING)) \
        .show()

    try:
        try:
            raise TypeError("parameterName cannot be None")
        except TypeError as inner:
            error = RuntimeError("Simulated exception for testing")
            error.InnerException = inner
            raise error
    except RuntimeError as ex:
        show_exception_dialog("Exception Test", ex)

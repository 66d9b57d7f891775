"""
Hip Browser Widget - Qt Interface for Browsing Versioned Hip Files

Shows the Houdini project files of a directory in a table and lets the user
open one of them. Can be reduced to the latest version of each file.
"""

from pathlib import Path

from HipPipe.houdini.tools.hip_browser import latest_versions, list_hip_files
from HipPipe.utils.host import getPySideVersion

# Dynamically import correct PySide version based on DCC
_pyside_version = getPySideVersion()

try:
    if _pyside_version == 2:
        from PySide2 import QtWidgets, QtCore, QtGui
    else:
        from PySide6 import QtWidgets, QtCore, QtGui
except ImportError as e:
    raise ImportError(
        f"PySide{_pyside_version} is required for this DCC but not available. "
        f"Please install PySide{_pyside_version}. Error: {e}"
    )


class HipBrowserWidget(QtWidgets.QDialog):
    """
    Qt dialog listing the hip files of a directory.

    Features:
    - Directory field with browse button
    - Table of base name, version, extension and full file name
    - "Latest versions only" filter
    """

    # Emitted with the full path of the file to open
    open_requested = QtCore.Signal(str)

    COLUMNS = ["Base", "Version", "Extension", "File Name"]

    def __init__(self, directory="", parent=None):
        super(HipBrowserWidget, self).__init__(parent)

        self.setWindowTitle("Hip Browser")
        self.setMinimumSize(600, 400)
        self.resize(700, 500)

        self._build_ui()
        self.dir_edit.setText(directory)

    def _build_ui(self):
        """Construct the user interface."""
        main_layout = QtWidgets.QVBoxLayout(self)

        # Title
        title = QtWidgets.QLabel("Houdini Project Files")
        title_font = QtGui.QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        title.setFont(title_font)
        main_layout.addWidget(title)

        # Directory row
        dir_layout = QtWidgets.QHBoxLayout()
        self.dir_edit = QtWidgets.QLineEdit()
        self.dir_edit.returnPressed.connect(self.refresh)
        browse_btn = QtWidgets.QPushButton("Browse...")
        browse_btn.clicked.connect(self._on_browse_clicked)
        dir_layout.addWidget(QtWidgets.QLabel("Directory:"))
        dir_layout.addWidget(self.dir_edit)
        dir_layout.addWidget(browse_btn)
        main_layout.addLayout(dir_layout)

        self.latest_only_check = QtWidgets.QCheckBox("Latest versions only")
        self.latest_only_check.setChecked(True)
        self.latest_only_check.toggled.connect(self.refresh)
        main_layout.addWidget(self.latest_only_check)

        # File table
        self.file_table = QtWidgets.QTableWidget()
        self.file_table.setColumnCount(len(self.COLUMNS))
        self.file_table.setHorizontalHeaderLabels(self.COLUMNS)
        self.file_table.horizontalHeader().setStretchLastSection(True)
        self.file_table.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectRows)
        self.file_table.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        self.file_table.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.file_table.doubleClicked.connect(self._on_open_clicked)
        main_layout.addWidget(self.file_table)

        self.status_label = QtWidgets.QLabel("")
        self.status_label.setWordWrap(True)
        main_layout.addWidget(self.status_label)

        # Action Buttons
        button_box = QtWidgets.QHBoxLayout()

        refresh_btn = QtWidgets.QPushButton("Refresh")
        refresh_btn.clicked.connect(self.refresh)

        self.open_btn = QtWidgets.QPushButton("Open")
        self.open_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; padding: 8px; font-weight: bold; }")
        self.open_btn.clicked.connect(self._on_open_clicked)

        close_btn = QtWidgets.QPushButton("Close")
        close_btn.clicked.connect(self.close)

        button_box.addWidget(refresh_btn)
        button_box.addWidget(self.open_btn)
        button_box.addStretch()
        button_box.addWidget(close_btn)

        main_layout.addLayout(button_box)

    def refresh(self):
        """Rescan the directory and fill the table."""
        self.file_table.setRowCount(0)

        directory = Path(self.dir_edit.text().strip())
        if not directory.is_dir():
            self.status_label.setText(f"Not a directory: {directory}")
            return

        try:
            hip_files = list_hip_files(directory)
        except OSError as e:
            self.status_label.setText(f"Error reading directory: {e}")
            return

        if self.latest_only_check.isChecked():
            hip_files = latest_versions(hip_files)

        if not hip_files:
            self.status_label.setText("No Houdini projects found.")
            return

        for hip_file in hip_files:
            row = self.file_table.rowCount()
            self.file_table.insertRow(row)
            values = [hip_file.base, f"{hip_file.version:03d}", hip_file.ext, hip_file.get_full_name()]
            for column, value in enumerate(values):
                self.file_table.setItem(row, column, QtWidgets.QTableWidgetItem(value))

        self.status_label.setText(f"Loaded {len(hip_files)} project file(s)")

    def get_selected_path(self):
        """
        Get the full path of the selected file.

        Returns:
            str or None: Path of the selected file, None if nothing is selected
        """
        row = self.file_table.currentRow()
        if row < 0:
            return None
        name = self.file_table.item(row, len(self.COLUMNS) - 1).text()
        return str(Path(self.dir_edit.text().strip()) / name)

    def _on_browse_clicked(self):
        """Handle Browse button click."""
        directory = QtWidgets.QFileDialog.getExistingDirectory(
            self, "Select Directory", self.dir_edit.text()
        )
        if directory:
            self.dir_edit.setText(directory)
            self.refresh()

    def _on_open_clicked(self):
        """Handle Open button click."""
        path = self.get_selected_path()

        if not path:
            QtWidgets.QMessageBox.warning(
                self,
                "No File Selected",
                "Please select a project file to open."
            )
            return

        self.open_requested.emit(path)

    def show_error(self, title, message):
        """
        Display error dialog.

        Args:
            title: Error dialog title
            message: Error message
        """
        QtWidgets.QMessageBox.critical(self, title, message)

# main.py
import os
import sys

from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QApplication,
    QWidget,
    QVBoxLayout,
    QLabel,
    QAction,
    QMainWindow,
    QFileDialog,
    QMessageBox,
    QTabWidget,
)

from menukit import Menu, MenuConfig, load_menu, MenuDefinitionError
from menukit.services.qt_host import QtHost

APP_TITLE = "menukit demo"
WIDTH_HEIGHT = [640, 480]
DEFAULT_MENU = os.path.join(os.path.dirname(os.path.abspath(__file__)), "menus", "demo.yaml")


class MenuDemoApp(QMainWindow):
    def __init__(self, menu_path=None):
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.resize(*WIDTH_HEIGHT)

        self.layout = QVBoxLayout()
        self.central_widget = QWidget(self)
        self.central_widget.setLayout(self.layout)
        self.setCentralWidget(self.central_widget)

        self.status_label = QLabel("No menu loaded")
        self.layout.addWidget(self.status_label)

        self.tabs = QTabWidget()
        self.layout.addWidget(self.tabs)

        file_menu = self.menuBar().addMenu("File")
        open_action = QAction("Open...", self)
        open_action.triggered.connect(self.choose_menu)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(open_action)
        file_menu.addSeparator()
        file_menu.addAction(quit_action)

        self.menu = None
        self.built = None
        if menu_path:
            self.open_menu(menu_path)

    def choose_menu(self):
        path, _ = QFileDialog.getOpenFileName(
            self, "Open menu definition", "", "YAML files (*.yaml *.yml)"
        )
        if path:
            self.open_menu(path)

    def open_menu(self, path):
        self.tabs.clear()
        self.menu = Menu(QtHost(self.tabs), config=MenuConfig(safe_callbacks=True))
        self.menu.events.error.connect(self.on_menu_error)

        try:
            self.built = load_menu(self.menu, path)
        except MenuDefinitionError as e:
            self.built = None
            QMessageBox.critical(self, "Invalid menu", str(e))
            self.status_label.setText("No menu loaded")
            return

        # Any edit can change what a dependent element should show
        for element in self.built.values():
            element.set_callback(self.on_element_changed)

        self.status_label.setText(f"Loaded {len(self.built)} element(s) from {os.path.basename(path)}")

    def on_element_changed(self, element, original):
        self.built.refresh()
        self.status_label.setText(f"{element.name()}: {element.get()!r}")

    def on_menu_error(self, event):
        self.status_label.setText(event.message)


if __name__ == "__main__":
    app = QApplication(sys.argv)

    font = QFont("Courier New", 10)
    app.setFont(font)

    window = MenuDemoApp(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_MENU)
    window.show()
    sys.exit(app.exec_())

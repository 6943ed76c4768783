import logging
import sys

from PyQt5.QtWidgets import QApplication

from inkmark.ui import MainWindow


def main():
    """
    Main function to run the Markdown reader application.
    It checks for a file path passed as a command-line argument.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)

    file_path = None
    if len(sys.argv) > 1:
        file_path = sys.argv[1]

    window = MainWindow(file_path)
    window.showMaximized()
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()

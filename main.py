# main.py

from PyQt5.QtWidgets import QApplication, QMessageBox
from errors import NetworkDataError
from mainwindow import MainWindow
from network import MigrationNetwork
from sample_data import sample_entities, sample_records
import sys
import traceback

def main():
    app = QApplication(sys.argv)
    try:
        network = MigrationNetwork.build(sample_entities(), sample_records())
    except NetworkDataError as e:
        traceback.print_exc()
        QMessageBox.critical(None, "Invalid data", f"Could not build the network:\n{e}")
        sys.exit(1)
    window = MainWindow(network)
    window.resize(1200, 900)
    window.show()
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()

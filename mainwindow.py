# mainwindow.py
from PyQt5.QtWidgets import (
    QMainWindow, QStatusBar, QAction, QMessageBox, QDockWidget, QWidget,
    QVBoxLayout, QPushButton, QLabel, QGroupBox, QShortcut
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence
from networkwidget import NetworkWidget

class MainWindow(QMainWindow):
    def __init__(self, network):
        super().__init__()
        self.setWindowTitle("Major Migration Network")

        self.graphWidget = NetworkWidget(network, self)
        self.setCentralWidget(self.graphWidget)

        self.setStatusBar(QStatusBar(self))

        self.createActions()
        self.createMenuBar()
        self.createControlsDock()
        self.createShortcuts()

        self.graphWidget.showAllFlows()

    def showEvent(self, event):
        super().showEvent(event)
        self.graphWidget.centerGraph()

    def createActions(self):
        threshold = self.graphWidget.network.config.major_flow_threshold
        self.allFlowsAction = QAction("&All Flows", self, triggered=self.graphWidget.showAllFlows)
        self.majorFlowsAction = QAction(f"&Major Flows (≥{threshold})", self, triggered=self.graphWidget.showMajorFlows)
        self.resetAction = QAction("&Reset Highlight", self, triggered=self.graphWidget.resetHighlight)
        self.exportAction = QAction("E&xport as Image...", self, triggered=self.graphWidget.exportAsImage)

        self.graphInfoAction = QAction("&Network Info", self, triggered=self.showGraphInfo)

        self.zoomInAction = QAction("Zoom &In", self, triggered=self.graphWidget.zoomIn)
        self.zoomOutAction = QAction("Zoom &Out", self, triggered=self.graphWidget.zoomOut)
        self.centerAction = QAction("&Center Graph", self, triggered=self.graphWidget.centerGraph)

        self.aboutAction = QAction("&About", self, triggered=self.showAbout)

    def createMenuBar(self):
        menuBar = self.menuBar()

        fileMenu = menuBar.addMenu("&File")
        fileMenu.addAction(self.exportAction)

        flowsMenu = menuBar.addMenu("F&lows")
        flowsMenu.addAction(self.allFlowsAction)
        flowsMenu.addAction(self.majorFlowsAction)
        flowsMenu.addSeparator()
        flowsMenu.addAction(self.resetAction)
        flowsMenu.addAction(self.graphInfoAction)

        viewMenu = menuBar.addMenu("&View")
        viewMenu.addAction(self.zoomInAction)
        viewMenu.addAction(self.zoomOutAction)
        viewMenu.addAction(self.centerAction)
        aboutMenu = menuBar.addMenu("&About")
        aboutMenu.addAction(self.aboutAction)

    def createControlsDock(self):
        dock = QDockWidget("Controls", self)
        dock.setAllowedAreas(Qt.RightDockWidgetArea)

        mainControlsWidget = QWidget()
        mainLayout = QVBoxLayout(mainControlsWidget)
        mainLayout.setAlignment(Qt.AlignTop)

        flowGroup = QGroupBox("Flows")
        flowLayout = QVBoxLayout()
        btn_all = QPushButton("All Flows (1)")
        btn_major = QPushButton(f"Major Flows ≥{self.graphWidget.network.config.major_flow_threshold} (2)")
        btn_reset = QPushButton("Reset (Esc)")
        btn_info = QPushButton("Network Info (I)")
        flowLayout.addWidget(btn_all)
        flowLayout.addWidget(btn_major)
        flowLayout.addWidget(btn_reset)
        flowLayout.addWidget(btn_info)
        flowGroup.setLayout(flowLayout)

        viewGroup = QGroupBox("View")
        viewLayout = QVBoxLayout()
        btn_center = QPushButton("Center Graph (C)")
        btn_zoom_in = QPushButton("Zoom In (+)")
        btn_zoom_out = QPushButton("Zoom Out (-)")
        btn_export = QPushButton("Export as Image (Ctrl+E)")
        viewLayout.addWidget(btn_center)
        viewLayout.addWidget(btn_zoom_in)
        viewLayout.addWidget(btn_zoom_out)
        viewLayout.addWidget(btn_export)
        viewGroup.setLayout(viewLayout)

        legend = QLabel(
            "Circle size = Graduates<br>"
            "Line color = Division receiving more students<br>"
            "Hover for details, click a major to highlight"
        )
        legend.setWordWrap(True)

        mainLayout.addWidget(flowGroup)
        mainLayout.addWidget(viewGroup)
        mainLayout.addSpacing(15)
        mainLayout.addWidget(legend)

        dock.setWidget(mainControlsWidget)
        self.addDockWidget(Qt.RightDockWidgetArea, dock)

        btn_all.clicked.connect(self.allFlowsAction.trigger)
        btn_major.clicked.connect(self.majorFlowsAction.trigger)
        btn_reset.clicked.connect(self.resetAction.trigger)
        btn_info.clicked.connect(self.graphInfoAction.trigger)
        btn_center.clicked.connect(self.centerAction.trigger)
        btn_zoom_in.clicked.connect(self.zoomInAction.trigger)
        btn_zoom_out.clicked.connect(self.zoomOutAction.trigger)
        btn_export.clicked.connect(self.exportAction.trigger)

    def createShortcuts(self):
        QShortcut(QKeySequence("1"), self, self.allFlowsAction.trigger)
        QShortcut(QKeySequence("2"), self, self.majorFlowsAction.trigger)
        QShortcut(QKeySequence(Qt.Key_Escape), self, self.resetAction.trigger)
        QShortcut(QKeySequence("Ctrl+E"), self, self.exportAction.trigger)
        QShortcut(QKeySequence("C"), self, self.centerAction.trigger)
        QShortcut(QKeySequence(Qt.Key_Plus), self, self.zoomInAction.trigger)
        QShortcut(QKeySequence(Qt.Key_Equal), self, self.zoomInAction.trigger)
        QShortcut(QKeySequence(Qt.Key_Minus), self, self.zoomOutAction.trigger)
        QShortcut(QKeySequence("I"), self, self.graphInfoAction.trigger)
        QShortcut(QKeySequence("F1"), self, self.aboutAction.trigger)

    def showGraphInfo(self):
        stats = self.graphWidget.network.get_stats()
        self.statusBar().showMessage(
            f"Majors: {stats['entities']}, Divisions: {stats['categories']}, "
            f"Connections: {stats['edges']} ({stats['major_edges']} major), "
            f"Students who switched: {stats['total_flow']}",
            6000
        )

    def showAbout(self):
        text = """
        <div style='min-width:380px'>
        <h3 style='margin:0 0 6px 0'>Major Migration Network</h3>
        <div style='margin-top:4px; line-height:1.55; color:#333'>
            Majors sit on a circle grouped by division; curves show students switching between them.<br>
            Curves bow by angular distance, bend further around crowded midpoints and stay inside
            the ring when their chord does.
        </div>
        </div>
        """
        dlg = QMessageBox(self)
        dlg.setWindowTitle("About")
        dlg.setTextFormat(Qt.RichText)
        dlg.setText(text)
        dlg.setStandardButtons(QMessageBox.Ok)
        dlg.exec_()

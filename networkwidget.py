# networkwidget.py

from PyQt5.QtWidgets import (
    QGraphicsView, QGraphicsScene, QGraphicsSimpleTextItem, QMessageBox, QFileDialog, QMenu, QToolTip
)

from PyQt5.QtCore import Qt, QPointF, QRectF
from PyQt5.QtGui import QPen, QColor, QPainter, QImage, QPainterPath, QFont
from PyQt5.QtWidgets import QGraphicsScene as QGS
from typing import Optional
import math

from interaction import (
    FlowFilter, HighlightState, highlight_classes,
    on_click, on_click_outside, on_filter_change, on_hover, on_leave, on_reset
)
from network import MigrationNetwork
from plotly_view import edge_hover_text, edge_width, node_hover_text

# Zoom behavior constants (stabilized)
ZOOM_FACTOR = 1.15
ZOOM_MAX = 50.0
MIN_ABS_SCALE = 1e-2
MIN_REL_TO_FIT = 0.25

EDGE_ALPHA = 0.4
EDGE_ALPHA_HIGHLIGHT = 0.8
EDGE_ALPHA_DIM = 0.1
NODE_ALPHA_DIM = 0.3

# Label font sizes (pt)
NODE_LABEL_PT = 7
DIVISION_LABEL_PT = 13


class NetworkWidget(QGraphicsView):
    def __init__(self, network: MigrationNetwork, parent=None):
        super().__init__(parent)
        self.network = network
        scene = QGraphicsScene(self)
        scene.setItemIndexMethod(QGS.NoIndex)
        self.setScene(scene)

        self.setRenderHint(QPainter.Antialiasing)
        self.setDragMode(QGraphicsView.NoDrag)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setViewportUpdateMode(QGraphicsView.SmartViewportUpdate)
        self.setMouseTracking(True)

        self.currentZoom = 1.0
        self._base_fit_scale = None
        self.panning = False
        self.pressPoint = None
        self.lastPanPoint = None
        self._in_update_scene = False

        self.highlight = HighlightState.none()
        self.flowFilter = FlowFilter.all(network.config.major_flow_threshold)

        self.background = QColor(255, 255, 255)

    # --------------------------
    # State transitions (UI -> pure functions in interaction.py)
    # --------------------------
    def _setHighlight(self, state: HighlightState):
        if state == self.highlight:
            return
        self.highlight = state
        self.updateGraphScene()
        self._notifyParent()

    def setFlowFilter(self, flowFilter: FlowFilter):
        self.highlight, self.flowFilter = on_filter_change(self.highlight, flowFilter)
        self.updateGraphScene()
        self._notifyParent()

    def showAllFlows(self):
        self.setFlowFilter(FlowFilter.all(self.network.config.major_flow_threshold))

    def showMajorFlows(self):
        self.setFlowFilter(FlowFilter.major(self.network.config.major_flow_threshold))

    def resetHighlight(self):
        self._setHighlight(on_reset(self.highlight))

    def _notifyParent(self):
        try:
            focus = self.highlight.focus()
            shown = len(self.network.visibleEdges(self.flowFilter))
            msg = f"{self.flowFilter.label()}: {shown} connections"
            if focus:
                kind = "Selected" if self.highlight.isSticky() else "Hover"
                msg += f" | {kind}: {focus} ({len(self.network.neighbors(focus))} linked majors)"
            self.parent().statusBar().showMessage(msg)
        except AttributeError:
            pass

    # ---------- Export ----------
    def exportAsImage(self):
        path, _ = QFileDialog.getSaveFileName(self, "Export as Image", "", "PNG Files (*.png);;SVG Files (*.svg)")
        if not path:
            return

        rect = self.scene().itemsBoundingRect().adjusted(-10, -10, 10, 10)
        size = rect.size().toSize()
        if size.width() <= 0 or size.height() <= 0:
            QMessageBox.warning(self, "Export", "Scene rect is empty; cannot export.")
            return

        if path.lower().endswith(".svg"):
            try:
                from PyQt5.QtSvg import QSvgGenerator
            except ImportError:
                QMessageBox.warning(self, "SVG Export", "QtSvg module not available. Please export PNG.")
                return
            generator = QSvgGenerator()
            generator.setFileName(path)
            generator.setSize(size)
            generator.setViewBox(rect)
            painter = QPainter()
            if painter.begin(generator):
                self.scene().render(painter, target=QRectF(0, 0, size.width(), size.height()), source=rect)
                painter.end()
        else:
            # Render at 2x for a crisp PNG
            w2, h2 = 2 * size.width(), 2 * size.height()
            image = QImage(w2, h2, QImage.Format_ARGB32_Premultiplied)
            image.fill(Qt.white)

            painter = QPainter(image)
            painter.setRenderHint(QPainter.Antialiasing)
            self.scene().render(painter, target=QRectF(0, 0, w2, h2), source=rect)
            painter.end()
            if not image.save(path):
                QMessageBox.warning(self, "Export", "Failed to save the PNG image.")
                return
        try:
            self.parent().statusBar().showMessage(f"Exported to {path}", 4000)
        except AttributeError:
            pass

    def drawBackground(self, painter, rect):
        painter.fillRect(rect, self.background)

    def updateGraphScene(self):
        if self._in_update_scene:
            return
        self._in_update_scene = True
        try:
            self.scene().clear()

            nodes = self.network.nodes()
            edges = self.network.visibleEdges(self.flowFilter)
            view = highlight_classes(
                self.highlight, edges, [n.id for n in nodes], self.network.neighbors(self.highlight.focus())
            )

            # --- Edges ---
            for e in edges:
                key = e.key()
                highlighted = key in view.highlighted_edges
                if highlighted:
                    alpha = EDGE_ALPHA_HIGHLIGHT
                elif key in view.dimmed_edges:
                    alpha = EDGE_ALPHA_DIM
                else:
                    alpha = EDGE_ALPHA
                color = QColor(e.color)
                color.setAlphaF(alpha)
                pen = QPen(color)
                pen.setWidthF(edge_width(e.totalFlow, highlighted))
                pen.setCapStyle(Qt.RoundCap)

                curve = self.network.edgePath(e)
                path = QPainterPath(curve.start)
                path.quadTo(curve.control, curve.end)

                item = self.scene().addPath(path, pen)
                item.setZValue(-10)
                item.setToolTip(edge_hover_text(e))

            # --- Nodes ---
            node_pen = QPen(Qt.black, 1.5)
            label_font = QFont()
            label_font.setPointSize(NODE_LABEL_PT)
            label_font.setBold(True)
            for n in nodes:
                d = 2.0 * n.radiusSize
                ellipse_item = self.scene().addEllipse(
                    n.x - d / 2, n.y - d / 2, d, d, node_pen, QColor(n.color)
                )
                ellipse_item.setZValue(10)
                if n.id in view.dimmed_nodes:
                    ellipse_item.setOpacity(NODE_ALPHA_DIM)

                text = QGraphicsSimpleTextItem(n.label)
                text.setFont(label_font)
                text_rect = text.boundingRect()
                text.setPos(n.x - text_rect.width() / 2, n.y - text_rect.height() / 2)
                text.setBrush(Qt.black)
                text.setZValue(20)
                self.scene().addItem(text)

            # --- Division labels ---
            div_font = QFont()
            div_font.setPointSize(DIVISION_LABEL_PT)
            div_font.setBold(True)
            for lab in self.network.labels():
                text = QGraphicsSimpleTextItem(lab.text)
                text.setFont(div_font)
                text.setBrush(QColor(lab.color))
                text_rect = text.boundingRect()
                text.setPos(lab.x - text_rect.width() / 2, lab.y - text_rect.height() / 2)
                text.setZValue(20)
                self.scene().addItem(text)

            # Fit scene rect (no view change)
            br = self.scene().itemsBoundingRect()
            if not br.isEmpty():
                self.scene().setSceneRect(br.adjusted(-50, -50, 50, 50))

            self.viewport().update()

        finally:
            self._in_update_scene = False

    # ---------- Zoom / camera ----------
    def _scaleNow(self):
        return max(1e-9, self.transform().m11())

    def _minAllowedScale(self):
        base = self._base_fit_scale if self._base_fit_scale is not None else self._scaleNow()
        return max(MIN_ABS_SCALE, base * MIN_REL_TO_FIT)

    def zoomIn(self):
        scale_now = self._scaleNow()
        target = min(ZOOM_MAX, scale_now * ZOOM_FACTOR)
        if target <= scale_now + 1e-12:
            return
        factor = target / scale_now
        self.scale(factor, factor)
        self.currentZoom = self.transform().m11()

    def zoomOut(self):
        scale_now = self._scaleNow()
        target = scale_now / ZOOM_FACTOR
        if target <= self._minAllowedScale() + 1e-12:
            return
        factor = target / scale_now
        self.scale(factor, factor)
        self.currentZoom = self.transform().m11()

    def centerGraph(self):
        if self.scene().items():
            rect = self.scene().itemsBoundingRect()
            safe_rect = rect.adjusted(-30, -30, 30, 30)
            if safe_rect.width() < 1e-6 or safe_rect.height() < 1e-6:
                return
            self.fitInView(safe_rect, Qt.KeepAspectRatio)
            self.currentZoom = self.transform().m11()
            self._base_fit_scale = self.currentZoom

    def wheelEvent(self, event):
        if event.angleDelta().y() > 0:
            self.zoomIn()
        else:
            self.zoomOut()
        event.accept()

    # ---------- Mouse: pan, hover, click ----------
    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.panning = True
            self.pressPoint = event.pos()
            self.lastPanPoint = event.pos()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self.panning:
            self.setCursor(Qt.ClosedHandCursor)
            delta = self.mapToScene(self.lastPanPoint) - self.mapToScene(event.pos())
            self.lastPanPoint = event.pos()
            self.translate(delta.x(), delta.y())
        else:
            scenePos = self.mapToScene(event.pos())
            nodeId = self.findEntityAtPosition(scenePos)
            if nodeId is not None:
                self._setHighlight(on_hover(self.highlight, nodeId))
                node = self.network.getNode(nodeId)
                QToolTip.showText(event.globalPos(), node_hover_text(node), self)
            else:
                self._setHighlight(on_leave(self.highlight))
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton and self.panning:
            self.panning = False
            self.setCursor(Qt.ArrowCursor)
            moved = (event.pos() - self.pressPoint).manhattanLength() if self.pressPoint else 0
            self.pressPoint = None
            # A release without dragging is a click
            if moved <= 3:
                nodeId = self.findEntityAtPosition(self.mapToScene(event.pos()))
                if nodeId is not None:
                    self._setHighlight(on_click(self.highlight, nodeId))
                else:
                    self._setHighlight(on_click_outside(self.highlight))
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event):
        self._setHighlight(on_leave(self.highlight))
        super().leaveEvent(event)

    def contextMenuEvent(self, event):
        menu = QMenu(self)
        menu.addAction("All Flows", self.showAllFlows)
        menu.addAction(f"Major Flows (≥{self.network.config.major_flow_threshold})", self.showMajorFlows)
        menu.addSeparator()
        menu.addAction("Reset Highlight (Esc)", self.resetHighlight)
        menu.addAction("Center Graph (C)", self.centerGraph)
        menu.exec_(event.globalPos())

    def findEntityAtPosition(self, scenePos: QPointF) -> Optional[str]:
        # Topmost (last drawn) node wins
        for n in reversed(self.network.nodes()):
            if math.hypot(n.x - scenePos.x(), n.y - scenePos.y()) <= n.radiusSize:
                return n.id
        return None

import logging
from typing import Optional

from pathtrace.core.adjacency import AdjacencyIndex
from pathtrace.core.animation.steps import TraceRecorder
from pathtrace.core.graph_paths.algorithms.wave import WaveFront
from pathtrace.core.graph_paths.base import FoundPath, SearchEngine
from pathtrace.core.graph_paths.types import Strategy
from pathtrace.core.graph_paths.utils import calculate_path_weight

logger = logging.getLogger(__name__)


class BidirectionalWaveFinder(SearchEngine):
    """
    Two wave searches, one from each end, meeting in the middle.

    Forward and backward waves alternate, one layer each, until a node already
    seen by the other side is either dequeued or newly discovered. The backward
    side grows over the transposed adjacency index, so each of its hops can be
    walked towards the target.

    Like the single wave, the per-side distance tables follow discovery order.
    They are not used for the result: the total distance is summed again from
    the live edge weights along the final path.

    Trace: ``Visit`` for start and end, alternating ``WaveExpand`` steps
    (``is_backward`` set on the target side, each side numbered from 0), then a
    ``Meet`` marker and a ``Reveal`` of the full path.
    """

    strategy = Strategy.BIDIRECTIONAL_WAVE

    def _search(
        self,
        adjacency: AdjacencyIndex,
        start_node: str,
        end_node: str,
        recorder: TraceRecorder,
    ) -> Optional[FoundPath]:
        forward = WaveFront(start_node, adjacency)
        backward = WaveFront(end_node, self.build_adjacency(transpose=True), is_backward=True)

        recorder.visit(start_node, (start_node,))
        recorder.visit(end_node, (end_node,))

        meeting: Optional[str] = None
        while (forward or backward) and meeting is None:
            for front, other in ((forward, backward), (backward, forward)):
                if not front:
                    continue

                wave, meeting = front.take_wave(stop_at=other.visited.__contains__)
                self.explored(len(wave))
                if meeting is not None:
                    break

                edges, discovered, meeting = front.expand(wave, stop_at=other.visited.__contains__)
                front.record(recorder, wave, edges, discovered)
                if meeting is not None:
                    break

        if meeting is None:
            return None

        forward_half = forward.path_to(meeting)
        backward_half = backward.path_to(meeting)
        backward_half.reverse()
        path = forward_half + backward_half[1:]

        distance = calculate_path_weight(self.store, path, reverse=self.reverse_traversal)
        logger.debug(
            "Frontiers met at %s after %d forward and %d backward waves",
            meeting,
            forward.wave_index,
            backward.wave_index,
        )

        recorder.meet(meeting)
        recorder.reveal(path)
        return path, distance

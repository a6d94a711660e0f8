import operator

from .Layer import Layer, DimensionMismatch
from ..helpers.Backend import backend


class DenseLayer(Layer):
    """
    Fully-connected layer with ReLU activation, trained one sample at a time.

    State per node:
        output:  (num_nodes,)               signal from the last feedforward
        error:   (num_nodes,)               signal from the last backpropagation
        bias:    (num_nodes,)
        weights: (num_nodes, num_weights)   weights[i][j] connects input j to node i

    Mismatched input/reference lengths are truncated to the overlapping
    prefix instead of being rejected.
    """

    def __init__(self, num_nodes=0, num_weights=0, rng=None):
        # rng: None (shared backend generator), int seed or np.random.Generator
        self.rng = None if rng is None else backend.generator(rng)
        self.resize(num_nodes, num_weights)

    def __repr__(self):
        return f"DenseLayer(num_nodes={self.node_count()}, num_weights={self.weight_count()})"

    # ---------- sizing ----------
    def clear(self):
        self.output = backend.zeros(0)
        self.error = backend.zeros(0)
        self.bias = backend.zeros(0)
        self.weights = backend.zeros((0, 0))

    def resize(self, num_nodes, num_weights):
        """
        Discard all state and allocate num_nodes nodes with num_weights
        weights each. Output and error start at 0; bias and weights get
        independent uniform random values in [0, 1).
        """
        # operator.index rejects non-integral sizes such as 2.9
        num_nodes, num_weights = operator.index(num_nodes), operator.index(num_weights)
        if num_nodes < 0 or num_weights < 0:
            raise ValueError(
                f"Layer dimensions must be non-negative, got {num_nodes}x{num_weights}"
            )
        self.clear()

        self.output = backend.zeros(num_nodes)
        self.error = backend.zeros(num_nodes)
        self.bias = backend.zeros(num_nodes)
        self.weights = backend.zeros((num_nodes, num_weights))

        for i in range(num_nodes):
            self.bias[i] = backend.uniform(None, rng=self.rng)
            self.weights[i] = backend.uniform(num_weights, rng=self.rng)

    def node_count(self):
        return self.output.shape[0]

    def weight_count(self):
        if self.node_count() == 0:
            return 0
        return self.weights.shape[1]

    # ---------- numerics ----------
    def feedforward(self, input):
        x = backend.ensure_array(input, ndim=1)
        k = min(self.weight_count(), x.shape[0])

        sums = self.bias + backend.matmul(self.weights[:, :k], x[:k])
        self.output[...] = backend.maximum(sums, 0.0)
        return backend.copy(self.output)

    def backpropagate_output(self, reference):
        """
        Error of an output layer from target values: reference - output for
        active nodes, 0 for inactive ones. Nodes past the end of 'reference'
        keep their previous error.
        """
        ref = backend.ensure_array(reference, ndim=1)
        k = min(self.node_count(), ref.shape[0])

        deviation = ref[:k] - self.output[:k]
        self.error[:k] = backend.where(self.output[:k] > 0, deviation, 0.0)
        return backend.copy(self.error)

    def backpropagate_hidden(self, next_layer):
        """
        Error of a hidden layer from the already backpropagated next layer:
        for node i, sum over next_layer nodes j of error[j] * weights[j][i],
        gated by whether node i was active.
        """
        n = self.node_count()
        if next_layer.weight_count() < n:
            raise DimensionMismatch(
                f"Next layer has {next_layer.weight_count()} weights per node, "
                f"but this layer has {n} nodes"
            )

        deviation = backend.matmul(next_layer.error, next_layer.weights[:, :n])
        self.error[...] = backend.where(self.output > 0, deviation, 0.0)
        return backend.copy(self.error)

    def optimize(self, input, learning_rate):
        x = backend.ensure_array(input, ndim=1)
        k = min(self.weight_count(), x.shape[0])

        step = self.error * learning_rate
        self.bias += step
        self.weights[:, :k] += backend.outer(step, x[:k])

    # ---------- parameters ----------
    def params(self):
        return [self.bias, self.weights]

    def snapshot_params(self):
        # Deep-copy bias and weights (in-memory only)
        return [backend.copy(p) for p in self.params()]

    def load_params(self, snapshot):
        bias, weights = (backend.ensure_array(p) for p in snapshot)
        if bias.shape != self.bias.shape or weights.shape != self.weights.shape:
            raise DimensionMismatch(
                f"Snapshot shapes {bias.shape}/{weights.shape} do not match "
                f"layer shapes {self.bias.shape}/{self.weights.shape}"
            )
        self.bias[...] = bias
        self.weights[...] = weights

    # ---------- inspection ----------
    def format_parameters(self):
        sep = "-" * 80

        def line(values):
            return " ".join(f"{v:.2f}" for v in values)

        rows = [
            sep,
            f"Number of nodes: {self.node_count()}",
            f"Number of weights per node: {self.weight_count()}",
            "",
            f"Output: {line(self.output)}",
            f"Error: {line(self.error)}",
            f"Bias: {line(self.bias)}",
            "",
            "Weights:",
        ]
        for i, row in enumerate(self.weights, start=1):
            rows.append(f"\tNode {i}: {line(row)}")
        rows.append(sep)
        return "\n".join(rows) + "\n"

    def print_parameters(self, file=None):
        print(self.format_parameters(), end="", file=file)

import numpy as np
from ..helpers.Backend import backend


class MeanSquaredError:
    def __init__(self):
        # cache from forward
        self.deviation = None

    def forward(self, output, reference):
        """
        output: (num_nodes,)   -- post-activation layer output
        reference: (num_refs,) -- target values
        returns: mean squared error over the first min(num_nodes, num_refs) values
        """
        output = backend.ensure_array(output, ndim=1)
        reference = backend.ensure_array(reference, ndim=1)

        k = min(output.shape[0], reference.shape[0])
        self.deviation = reference[:k] - output[:k]
        if k == 0:
            return 0.0
        return float(np.mean(self.deviation ** 2))

    def backward(self):
        """
        reference - output, the signal DenseLayer.backpropagate_output stores
        for active nodes.
        """
        if self.deviation is None:
            raise ValueError("Must call forward() before backward()")
        return self.deviation

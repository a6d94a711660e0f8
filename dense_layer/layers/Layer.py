class Layer:
    # Subclasses override as needed
    def feedforward(self, input):
        raise NotImplementedError

    def optimize(self, input, learning_rate):
        raise NotImplementedError

    def params(self):
        # Return list of parameter ndarrays (e.g., [bias, weights])
        return []


class DimensionMismatch(ValueError):
    """Raised when two layers (or a layer and a snapshot) disagree in shape."""

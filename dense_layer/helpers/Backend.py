# dense_layer/helpers/Backend.py
import numpy as np


class Backend:
    """NumPy backend shared by the dense layers (array creation + randomness)."""
    def __init__(self, default_float=np.float64, seed=None):
        self.xp = np
        self.default_float = default_float
        self._rng = np.random.default_rng(seed)

    # -------- array creation --------
    def ensure_array(self, x, dtype=None, ndim=None):
        """
        Ensure 'x' is a NumPy array of the default float dtype.
        Accepts list/tuple/np arrays. If 'ndim' is given, the result must
        have exactly that many dimensions.
        """
        if dtype is None:
            dtype = self.default_float
        arr = np.asarray(x, dtype=dtype)
        if ndim is not None and arr.ndim != ndim:
            raise ValueError(
                f"Expected a {ndim}-D sequence, got an array of shape {arr.shape}"
            )
        return arr

    def zeros(self, *args, **kwargs):
        kwargs.setdefault("dtype", self.default_float)
        return np.zeros(*args, **kwargs)

    def copy(self, x):
        return self.xp.array(x, dtype=self.default_float, copy=True)

    # -------- math (thin wrappers) --------
    def maximum(self, a, b):   return self.xp.maximum(a, b)
    def where(self, cond, a, b): return self.xp.where(cond, a, b)
    def matmul(self, a, b):    return self.xp.matmul(a, b)
    def outer(self, a, b):     return self.xp.outer(a, b)

    # -------- randomness --------
    def generator(self, rng=None):
        """
        Resolve a random source.
        None -> the shared generator, int -> a freshly seeded generator,
        np.random.Generator -> returned as-is.
        """
        if rng is None:
            return self._rng
        return np.random.default_rng(rng)

    def seed(self, seed=42):
        """Seed the shared generator for reproducibility."""
        self._rng = np.random.default_rng(seed)

    def uniform(self, shape, rng=None):
        """Uniform values in [0, 1)."""
        return self.generator(rng).random(shape, dtype=self.default_float)


# Global backend instance - can be reseeded with backend.seed(...)
backend = Backend()

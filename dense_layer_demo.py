import numpy as np
from dense_layer import DenseLayer, MeanSquaredError
from dense_layer.helpers.logger import RunLogger


def train(x, reference, num_nodes=3, num_weights=4, learning_rate=0.01, epochs=50,
          seed=None, logger=None, verbose=True):
    layer = DenseLayer(num_nodes, num_weights, rng=seed)
    loss_fn = MeanSquaredError()
    history = {"loss": []}

    for epoch in range(1, epochs + 1):
        output = layer.feedforward(x)
        loss = loss_fn.forward(output, reference)
        layer.backpropagate_output(reference)
        layer.optimize(x, learning_rate)

        history["loss"].append(loss)
        if logger is not None:
            logger.log_epoch(epoch, loss=loss)
            logger.log_layer(epoch, layer)
        if verbose:
            print(f"Epoch {epoch}/{epochs} - loss: {loss:.4f}")
            layer.print_parameters()

    return layer, history


if __name__ == "__main__":
    x = [1, 2, 3, 4]
    yref = [2, 4, 6]

    logger = RunLogger(root="runs", tag="dense_layer")
    layer, history = train(
        x, yref, num_nodes=3, num_weights=4, learning_rate=0.01, epochs=50,
        seed=0, logger=logger,
    )
    logger.save_json()
    logger.plot_loss(history, tag="dense_layer")

    print("Final output:", np.round(layer.feedforward(x), 2))
    print("Reference:   ", yref)

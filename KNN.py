import logging
from collections import namedtuple

import numpy as np
from tqdm import tqdm

from Classifier import Classifier
from knn_utils import FrequencyCounter, squared_distance

logger = logging.getLogger(__name__)

# Training data and labels are only ever present together.
TrainedState = namedtuple("TrainedState", ["data", "labels"])


class KNNClassifier(Classifier):
    """
    k-Nearest Neighbors (k-NN) classifier implemented from scratch.

    Ranks training points by squared Euclidean distance (same order as the
    plain Euclidean distance, without the square root) and returns the
    majority label of the k closest ones.
    NOTE: This model is a 'lazy learner': fit() only stores the data.
    """
    def __init__(self, k=3, verbose=False):
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
            raise ValueError(f"k must be an integer, got {k!r}.")
        if k < 0:
            raise ValueError("k must be non-negative.")
        # k is the number of neighbors that vote; 0 means no prediction is possible
        self.k = int(k)
        self.verbose = verbose
        self._state = None

    @property
    def is_fitted(self):
        return self._state is not None

    @property
    def data(self):
        """Stored training vectors as a read-only (n_samples, n_features) array, or None."""
        return None if self._state is None else self._state.data

    @property
    def labels(self):
        """Stored training labels, or None."""
        return None if self._state is None else list(self._state.labels)

    def fit(self, data, labels):
        """
        Fitting just means storing the training data.
        Any previous training state is replaced.
        """
        if len(data) != len(labels):
            raise ValueError(f"Number of samples in data and labels must match: got {len(data)} and {len(labels)}.")

        try:
            X = np.array(data, dtype=float)
        except ValueError as e:
            raise ValueError(f"Training data must be a set of equal-length numeric vectors: {e}") from e

        if X.size == 0 and X.ndim == 1:
            X = X.reshape(0, 0)
        if X.ndim != 2:
            raise ValueError(f"Training data must be 2-D (n_samples, n_features), got shape {X.shape}.")
        X.setflags(write=False)

        self._state = TrainedState(X, tuple(labels))
        logger.info(f"KNN fitted with {X.shape[0]} samples (k={self.k}).")
        return self

    def kneighbors(self, x):
        """
        Indices and squared distances of the k nearest training points to x,
        nearest first. Equal distances keep training order. Returns None if
        the model is not fitted.
        """
        if self._state is None:
            return None

        # 1. Squared distances from x to every training sample
        distances = np.array([squared_distance(x, x_train) for x_train in self._state.data])

        # 2. Indices of the k smallest distances (stable, so ties keep training order)
        k_indices = np.argsort(distances, kind="stable")[:self.k]

        return [(int(i), float(distances[i])) for i in k_indices]

    def predict_one(self, x):
        """
        Predict the label for a single sample x.
        Returns None if not fitted, or if there is nobody to vote (k == 0 or
        no training data).
        """
        neighbors = self.kneighbors(x)
        if neighbors is None:
            return None

        # 3. Count the neighbor labels, nearest first, so a tied vote goes to
        #    the label that the closer neighbor carries
        labels = self._state.labels
        counter = FrequencyCounter(labels[i] for i, _ in neighbors)

        # 4. Majority vote
        most_common = counter.most_frequent()
        if most_common is None:
            return None
        return most_common[0]

    def predict(self, data):
        """
        Predicts the class label for each sample in data, in order.
        Returns None if the model is not fitted.
        """
        if self._state is None:
            return None

        logger.debug(f"Predicting for {len(data)} samples using KNN (k={self.k})...")
        return [self.predict_one(x) for x in tqdm(data, desc="Predicting with KNN", disable=not self.verbose)]

    def __repr__(self):
        return f"KNNClassifier(k={self.k})"

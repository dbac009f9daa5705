from abc import ABC, abstractmethod

from sklearn.metrics import accuracy_score


class Classifier(ABC):
    """
    Common interface for the classifiers in this project.

    fit() stores or learns from labelled examples; predict() and predict_one()
    return None instead of raising when the model has not been fitted yet.
    """

    @abstractmethod
    def fit(self, data, labels):
        """Train the classifier on examples and their index-aligned labels."""

    @abstractmethod
    def predict(self, data):
        """Predict one label per example in data, or None if not fitted."""

    @abstractmethod
    def predict_one(self, x):
        """Predict the label of a single example, or None if not fitted."""

    @property
    @abstractmethod
    def is_fitted(self):
        """True once fit() has been called."""

    def score(self, data, labels):
        """
        Accuracy of predict(data) against the true labels.
        Returns None if the model is not fitted or cannot make a prediction.
        """
        if len(data) != len(labels):
            raise ValueError(f"Number of examples and labels must match: got {len(data)} and {len(labels)}.")

        predictions = self.predict(data)
        if not predictions or any(p is None for p in predictions):
            return None

        # accuracy_score reads tuples as multioutput targets, so compare label codes
        codes = {}
        for label in list(labels) + predictions:
            codes.setdefault(label, len(codes))

        y_true = [codes[label] for label in labels]
        y_pred = [codes[label] for label in predictions]
        return float(accuracy_score(y_true, y_pred))

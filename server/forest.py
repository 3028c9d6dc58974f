# server/forest.py
import numbers

from shared.errors import InvalidArgumentError, ModelFormatError
from server.tree_traversal import DecisionTree


class Forest:
    """
    Binary random forest: sums every tree's (no, yes) leaf weights and maps
    the winning index through `classes`. Ties go to classes[1].
    """

    def __init__(self, trees, n_features, classes=(0, 1), n_classes=2):
        if n_classes != 2:
            raise ModelFormatError(f"only binary forests are supported, got n_classes={n_classes}")
        if len(classes) != 2:
            raise ModelFormatError(f"classes must have exactly 2 labels, got {list(classes)}")
        if not trees:
            raise ModelFormatError("forest has no trees")

        for c in classes:
            if isinstance(c, bool) or not isinstance(c, numbers.Real) or not float(c).is_integer():
                raise ModelFormatError(f"class labels must be integers, got {list(classes)}")

        self.trees = tuple(trees)
        self.n_features = int(n_features)
        self.n_classes = int(n_classes)
        self.classes = tuple(int(c) for c in classes)

    @property
    def n_estimators(self) -> int:
        return len(self.trees)

    def votes(self, features):
        """Return (total_no, total_yes) summed over all trees."""
        if len(features) != self.n_features:
            raise InvalidArgumentError(len(features), self.n_features)

        total_no = 0.0
        total_yes = 0.0
        for tree in self.trees:
            no_weight, yes_weight = tree.predict(features)
            total_no += no_weight
            total_yes += yes_weight
        return total_no, total_yes

    def predict(self, features) -> int:
        total_no, total_yes = self.votes(features)
        winner = 1 if total_yes >= total_no else 0
        return self.classes[winner]

    @classmethod
    def from_dict(cls, data: dict) -> "Forest":
        n_features = int(data["n_features"])
        trees = [DecisionTree.from_dict(t, n_features=n_features) for t in data["trees"]]

        n_estimators = data.get("n_estimators")
        if n_estimators is not None and int(n_estimators) != len(trees):
            raise ModelFormatError(
                f"model declares n_estimators={n_estimators} but holds {len(trees)} trees"
            )
        return cls(
            trees=trees,
            n_features=n_features,
            classes=data["classes"],
            n_classes=int(data.get("n_classes", 2)),
        )

    def to_dict(self) -> dict:
        return {
            "n_estimators": self.n_estimators,
            "n_features": self.n_features,
            "n_classes": self.n_classes,
            "classes": list(self.classes),
            "trees": [tree.to_dict() for tree in self.trees],
        }

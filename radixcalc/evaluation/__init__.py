from radixcalc.evaluation.reorder import reorder
from radixcalc.evaluation.evaluator import evaluate

__all__ = ["reorder", "evaluate"]

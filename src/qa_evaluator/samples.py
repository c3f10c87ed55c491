"""Built-in sample question, answer and retrieved context."""

from .models.request import EvaluationRequest

SAMPLE_QUESTION = "How do neural networks learn from data?"

SAMPLE_ANSWER = (
    "Neural networks learn from data through a process called backpropagation. "
    "This algorithm adjusts the weights of connections between neurons based on the "
    "error in the network's output. During training, the network makes predictions, "
    "calculates the error against known outputs, and then propagates this error backward "
    "through the network to update weights. This iterative process minimizes the error "
    "over time, allowing the network to recognize patterns and make accurate predictions "
    "on new data."
)

SAMPLE_CONTEXT = [
    "Neural networks consist of layers of interconnected nodes, and learn by adjusting "
    "connection weights.",
    "Backpropagation is the primary algorithm used to train neural networks by calculating "
    "gradients.",
    "Training data is fed through the network in batches to optimize the learning process.",
]


def sample_request(with_context: bool = True) -> EvaluationRequest:
    """Build the sample request, optionally with its three context passages."""
    return EvaluationRequest(
        question=SAMPLE_QUESTION,
        answer=SAMPLE_ANSWER,
        retrieved_context=list(SAMPLE_CONTEXT) if with_context else None,
    )

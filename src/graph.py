from langgraph.graph import StateGraph, START, END

from src.models import LogRunState
from steps.start import start
from steps.write import write
from steps.stop import stop
from steps.send import send


def create_graph(enable_send: bool = False):
    """
    Create the log lifecycle workflow graph.

    Args:
        enable_send: If True, mails the finished log (start → write → stop → send).
                     If False, runs start → write → stop only.
    """
    workflow = StateGraph(LogRunState)

    # Add nodes
    workflow.add_node("start", start)
    workflow.add_node("write", write)
    workflow.add_node("stop", stop)

    if enable_send:
        workflow.add_node("send", send)

    # Add edges
    workflow.add_edge(START, "start")
    workflow.add_edge("start", "write")
    workflow.add_edge("write", "stop")

    if enable_send:
        workflow.add_edge("stop", "send")
        workflow.add_edge("send", END)
    else:
        workflow.add_edge("stop", END)

    return workflow.compile()

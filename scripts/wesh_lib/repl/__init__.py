"""
wesh_lib.repl - REPL components for WeSh

This package contains the command-dispatch engine of the shell:
- outcome: MoveToBranch / InvokeAction / Unresolved
- branch: Branch, BranchTree arena and prompt helpers
- action: Action directive and the Directive union
- registry: Ordered directive registry
- state: ShellState and outcome application
- actions: Built-in named action handlers
- loop: Line readers and the main REPL loop
"""

from .outcome import MoveToBranch, InvokeAction, Unresolved, Outcome
from .branch import Branch, BranchTree, BranchLookupError, prompt_text, print_prompt
from .action import Action, Directive
from .registry import Registry, RegistrySealedError
from .state import ShellState, apply_outcome, report_unresolved, step
from .actions import ACTION_HANDLERS, make_action
from .loop import InputStreamError, PromptReader, StreamReader, run_loop

__all__ = [
    'MoveToBranch', 'InvokeAction', 'Unresolved', 'Outcome',
    'Branch', 'BranchTree', 'BranchLookupError', 'prompt_text', 'print_prompt',
    'Action', 'Directive',
    'Registry', 'RegistrySealedError',
    'ShellState', 'apply_outcome', 'report_unresolved', 'step',
    'ACTION_HANDLERS', 'make_action',
    'InputStreamError', 'PromptReader', 'StreamReader', 'run_loop',
]

from __future__ import annotations

from dataclasses import dataclass, replace

from .lines import COMPONENT, INGREDIENT, NOTE, STEP, TITLE, ClassifiedLine
from .models import Component, Step


@dataclass(frozen=True)
class BuilderState:
    """Accumulated document plus the currently open component and step.

    ``step_text`` is ``None`` when no step is open. An open step with empty
    text still collects ingredients but is dropped when finalized.
    """

    title: str | None = None
    notes: tuple[str, ...] = ()
    components: tuple[Component, ...] = ()
    errors: tuple[str, ...] = ()
    component_name: str | None = None
    component_steps: tuple[Step, ...] = ()
    step_text: str | None = None
    step_ingredients: tuple[str, ...] = ()


def finalize_step(state: BuilderState) -> BuilderState:
    steps = state.component_steps
    if state.step_text:
        steps = steps + (Step(text=state.step_text, ingredients=state.step_ingredients),)
    return replace(state, component_steps=steps, step_text=None, step_ingredients=())


def finalize_component(state: BuilderState) -> BuilderState:
    state = finalize_step(state)
    components = state.components
    if state.component_steps:
        components = components + (Component(name=state.component_name, steps=state.component_steps),)
    return replace(state, components=components, component_name=None, component_steps=())


def apply_line(state: BuilderState, line: ClassifiedLine) -> BuilderState:
    payload = line.payload
    if line.prefix == TITLE:
        return replace(state, title=payload)
    if line.prefix == NOTE:
        return replace(state, notes=state.notes + (payload,))
    if line.prefix == COMPONENT:
        return replace(finalize_component(state), component_name=payload)
    if line.prefix == STEP:
        return replace(finalize_step(state), step_text=payload)
    if line.prefix == INGREDIENT:
        if state.step_text is None:
            message = f'Ingredient "{payload}" must belong to a step.'
            return replace(state, errors=state.errors + (message,))
        return replace(state, step_ingredients=state.step_ingredients + (payload,))
    return state


def build_document(lines: list[ClassifiedLine]) -> BuilderState:
    state = BuilderState()
    for line in lines:
        state = apply_line(state, line)
    return finalize_component(state)

# ui_components.py

import logging

import gradio as gr

from frontend.event_handlers import (EMPTY_LIST_MESSAGE, handle_file_upload,
                                     handle_generate, handle_remove_file)
from frontend.intake import IntakeState

# --- Logger Setup ---
logger = logging.getLogger(__name__)


def build_ui() -> gr.Blocks:
    """Builds the upload page: drop zone, staged list, generate button and result panel."""
    with gr.Blocks(title="PodcastGen") as demo:
        intake_state = gr.State(IntakeState())

        gr.Markdown("# PodcastGen\n## Genera tu podcast en minutos")
        gr.Markdown("Sube tus documentos PDF y obtén un diálogo entre dos personas listo para tu próximo podcast.")

        file_input = gr.File(
            label="Arrastra y suelta tus archivos o haz clic para seleccionarlos",
            file_count="multiple",
            type="filepath",
        )

        staged_files_md = gr.Markdown(f"*{EMPTY_LIST_MESSAGE}*")
        with gr.Row():
            remove_dd = gr.Dropdown(choices=[], value=None, type="index", label="Archivo", scale=3)
            remove_btn = gr.Button("Eliminar", variant="secondary", scale=1)

        generate_btn = gr.Button("Generar Podcast", variant="primary", interactive=False)
        status_md = gr.Markdown()
        result_box = gr.Textbox(label="Diálogo", lines=20, interactive=False)

        view_outputs = [intake_state, staged_files_md, remove_dd, generate_btn, status_md, result_box]

        # --- Event Wiring ---
        file_input.upload(
            fn=handle_file_upload,
            inputs=[file_input, intake_state],
            outputs=[file_input] + view_outputs,
            show_progress="hidden",
        )
        remove_btn.click(
            fn=handle_remove_file,
            inputs=[remove_dd, intake_state],
            outputs=view_outputs,
            show_progress="hidden",
        )
        # A click while a submission is pending is dropped, not queued
        generate_btn.click(
            fn=handle_generate,
            inputs=[intake_state],
            outputs=view_outputs,
            show_progress="minimal",
            trigger_mode="once",
        )

    return demo

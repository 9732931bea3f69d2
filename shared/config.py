"""Shared application configuration: accepted media and user-facing text."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MediaConstraints:
    """Media types consumed by the intake; everything else is dropped."""

    document_type: str = "application/pdf"
    video_type_prefix: str = "video/"


MEDIA_CONSTRAINTS = MediaConstraints()


ERROR_MESSAGES = {
    "missing_inputs": "Por favor, envie o arquivo PDF da ata e pelo menos um arquivo de vídeo.",
    "processing_failed": "Ocorreu um erro durante o processo. Verifique o console para mais detalhes.",
    "anonymize_failed": "Falha ao anonimizar o texto.",
    "correction_failed": "Falha ao aplicar a correção.",
    "missing_transcript": "Não há transcrição para processar.",
    "missing_correction": "Descreva a correção a ser aplicada.",
    "session_busy": "Já existe um processamento em andamento.",
    "copy_succeeded": "Texto copiado para a área de transferência!",
    "copy_failed": "Falha ao copiar o texto.",
}


STATUS_LABELS = {
    "analyzing_document": "Analisando PDF...",
    "participants_identified": "Participantes identificados. Transcrevendo {total} vídeo(s)...",
    "transcribing_video": "Processando vídeo {index} de {total}: {name}",
    "completed": "Processo concluído!",
    "failed": "Ocorreu um erro.",
    "anonymizing": "Anonimizando o texto...",
    "anonymized": "Texto anonimizado!",
    "correcting": "Aplicando correção...",
    "corrected": "Correção aplicada!",
}


EXPORT_FORMATS = ("txt", "md")

"""Prompt templates and transcript segment markers.

Every prompt is sent as a single user turn; document and video parts are
placed before the instruction text.
"""

import re

PARTICIPANTS_PROMPT = (
    "Analise a ata de audiência em PDF e extraia o nome completo e a função de "
    "todos os participantes (Juiz, promotor, partes, advogados, testemunhas, etc.). "
    "Retorne uma lista clara."
)

TRANSCRIPTION_PROMPT = """Você é um assistente de degravação para um Juiz de Direito. Sua função é transcrever o vídeo da audiência judicial.
- Transcreva EXATAMENTE o que for dito. Não deduza, não presuma, não invente.
- A transcrição deve ser literal, linha por linha, no formato: "Nome do Interlocutor – Função – O que foi dito.".
- Use a lista de participantes a seguir para identificar quem está falando: {participants}.
- Se não for possível identificar um interlocutor com certeza, use "Pessoa não identificada X".
- Considere estas informações adicionais do usuário: "{notes}".
- Comece a transcrição."""

NO_NOTES = "Nenhuma"

ANONYMIZE_PROMPT = """Anonimize integralmente o texto a seguir. Substitua nomes de partes, pessoas e empresas apenas pelas iniciais. Substitua endereços apenas pelas iniciais. Substitua valores monetários por "x".

{transcript}"""

CORRECTION_PROMPT = """Aplique a seguinte correção ao texto da transcrição. Devolva apenas o texto completo e corrigido, sem comentários adicionais.

Correção: "{correction}"

Texto original:
{transcript}"""

SEGMENT_BEGIN = "--- INÍCIO DA DEGRAVAÇÃO DO VÍDEO: {name} ---"
SEGMENT_END = "--- FIM DA DEGRAVAÇÃO DO VÍDEO: {name} ---"

SEGMENT_BEGIN_PATTERN = re.compile(r"--- INÍCIO DA DEGRAVAÇÃO DO VÍDEO: (?P<name>.+) ---")
SEGMENT_END_PATTERN = re.compile(r"--- FIM DA DEGRAVAÇÃO DO VÍDEO: (?P<name>.+) ---")


def build_transcription_prompt(participants: str, notes: str) -> str:
    """Fill the transcription template; empty notes become an explicit 'none'."""
    return TRANSCRIPTION_PROMPT.format(
        participants=participants,
        notes=notes or NO_NOTES,
    )


def build_anonymize_prompt(transcript: str) -> str:
    return ANONYMIZE_PROMPT.format(transcript=transcript)


def build_correction_prompt(correction: str, transcript: str) -> str:
    return CORRECTION_PROMPT.format(correction=correction, transcript=transcript)


def begin_marker(name: str) -> str:
    """Block opening a video's segment in the transcript buffer."""
    return f"\n\n{SEGMENT_BEGIN.format(name=name)}\n\n"


def end_marker(name: str) -> str:
    """Block closing a video's segment in the transcript buffer."""
    return f"\n\n{SEGMENT_END.format(name=name)}"

"""
SRT Overlay Sequencer — Overlay Package

Turns SubRip subtitles into timed overlay instructions:
  - timestamps: SRT timestamp <-> seconds conversion
  - srt_reader: .srt file loading and lexing (pysrt)
  - style: style parameters and inline styled text
  - sequencer: cue-to-instruction timing transform
  - instructions: Wait / ShowText instruction types
  - runner: one read → sequence run with a success/error result
  - player: sequential reference executor
  - manifest: host manifest and parameter schema
"""

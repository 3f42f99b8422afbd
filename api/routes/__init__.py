"""Route handlers following Single Responsibility Principle

Each router module handles a single resource/concept:
- health: liveness and collection discovery
- files: file upload/listing/deletion per collection
- chatbot: assistant conversation
- training: training recommendations
- errors: {"error": ...} response envelope
"""

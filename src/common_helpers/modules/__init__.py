"""📦 modules/ — Bounded contexts específicos

✨ Estado actual:
   • file_io/  → rutas multiplataforma, lectura/escritura, directorios, checksums

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/         → Value objects, excepciones, puertos
   • application/    → Casos de uso sobre los puertos
   • infrastructure/ → Adaptadores concretos, configuración, observabilidad
   • entry_points/   → CLI
"""

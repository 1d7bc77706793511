import jax

# Double precision so conservation checks can use tight tolerances.
jax.config.update("jax_enable_x64", True)

"""ViewModel package for the checkout page state.

Call context:
    ``onepage.app.controller.AppController`` builds ``CheckoutVM`` and the REST
    layer in ``rest_api/app.py`` calls it once per page render.

Dependencies:
    Modules in this package depend on domain types and use-case callables
    only. Service I/O stays behind the ports the use cases receive.

Responsibilities:
    - Hold the request-scoped checkout forms.
    - Turn cart snapshots into the named view variables the template binds.
    - Serialize those variables for JSON consumers.
"""
